import os

from dotenv import load_dotenv

load_dotenv()

OPTSET_LOG_LEVEL = os.environ.get("OPTSET_LOG_LEVEL", "WARNING")
