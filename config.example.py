"""
Example configuration file for the IT Glossary API
Copy this file to config.py and fill in your actual values
(or generate it with: python3 utils/config_generator.py)
"""

# === Content API Configuration ===
CMS_SERVICE_DOMAIN = 'your-service-domain'  # <domain>.microcms.io
CMS_API_KEY = 'your_api_key'
CMS_BASE_URL = ''  # Optional override, e.g. 'http://localhost:3001/api/v1'

# === Request Configuration ===
REQUEST_TIMEOUT = 10.0  # Seconds per request
REQUEST_MAX_RETRIES = 3  # Attempts per read (GET only)
REQUEST_RETRY_BACKOFF = 1.0  # Seconds, multiplied by the attempt number

# === Logging Configuration ===
LOG_LEVEL = 'INFO'  # Options: DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_FILE = 'logs/glossary.log'
