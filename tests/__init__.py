"""Test package for llming-badgr."""
import os

# load live credentials for the regression tests if a .env file is around
from dotenv import load_dotenv

dir = os.path.dirname(__file__)

max_step = 5
# find the .env file
cur_step = 0
while not os.path.exists(os.path.join(dir, ".env")) and cur_step <= max_step and dir != "/":
    dir = os.path.dirname(dir)
    cur_step += 1

if os.path.exists(os.path.join(dir, ".env")):
    load_dotenv(os.path.join(dir, ".env"))
