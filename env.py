"""
Environment configuration for the GroupMe command-line tool.
Contains the access token and API settings.
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# GroupMe API access token
GROUPME_TOKEN = os.getenv('GROUPME_TOKEN', '')

GROUPME_API_URL = os.getenv('GROUPME_API_URL', 'https://api.groupme.com/v3')

GROUPME_LOG_LEVEL = os.getenv('GROUPME_LOG_LEVEL', 'WARNING')
