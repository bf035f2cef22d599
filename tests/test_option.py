from __future__ import annotations

from sample_options import Find, Grep, Ls

from optset import DefaultOptionSet, Option, option_table


def test_acronym_and_long_name() -> None:
    assert Ls.recursive.acronym == "R"
    assert Ls.recursive.long_name == "recursive"
    assert Ls.human_readable.long_name == "human-readable"


def test_declaration_order() -> None:
    assert [o.acronym for o in Ls] == ["a", "l", "R", "h"]
    assert issubclass(Ls, Option)


def test_shared_acronyms_keep_distinct_members() -> None:
    assert list(Grep) == [Grep.count, Grep.context, Grep.ignore_case]
    assert Grep.count is not Grep.context
    assert Grep.count.acronym == Grep.context.acronym == "c"


def test_shared_acronyms_reach_every_member() -> None:
    s = DefaultOptionSet(Grep).set_use_acronym_for_all(True)
    assert s.use_acronym_for(Grep.context)

    s.set_all(Grep.count, Grep.context)
    assert s.size() == 2
    assert list(s) == [Grep.count, Grep.context]
    assert option_table(s).row_count == 3


def test_multi_character_acronym() -> None:
    assert Find.ignore_case.acronym == "ic"
    assert Find.ignore_case.long_name == "ignore-case"
