import os

# WeatherAPI.com
WEATHER_API_KEY = os.environ.get('WEATHERAPI')
WEATHER_API_BASE = os.environ.get('WEATHER_API_BASE', 'https://api.weatherapi.com/v1')

# Chat completions (optional rideability text)
OPENAI_API_KEY = os.environ.get('OPENAI_API_KEY')
OPENAI_CHAT_URL = os.environ.get('OPENAI_CHAT_URL', 'https://api.openai.com/v1/chat/completions')
CHAT_MODEL = os.environ.get('CHAT_MODEL', 'gpt-3.5-turbo')
RIDEABILITY_SOURCE = os.environ.get('RIDEABILITY_SOURCE', 'rules')  # 'rules' or 'chat'

# Output document
STATUS_FILE = os.environ.get('STATUS_FILE', os.path.join('public', 'trailStatuses.json'))
STATUS_SOURCE_URL = os.environ.get('STATUS_SOURCE_URL')  # remote raw-file URL, overrides STATUS_FILE for the dashboard

TIMEZONE = os.environ.get('TIMEZONE', 'America/Los_Angeles')

HISTORY_DAYS = int(os.environ.get('HISTORY_DAYS', 5))
FORECAST_DAYS = int(os.environ.get('FORECAST_DAYS', 3))
FORECAST_KEEP_DAYS = int(os.environ.get('FORECAST_KEEP_DAYS', 2))

# Rate limit: seconds between sequential history requests
REQUEST_DELAY = float(os.environ.get('REQUEST_DELAY', 1.0))
HISTORY_WORKERS = int(os.environ.get('HISTORY_WORKERS', 1))
REQUEST_TIMEOUT = float(os.environ.get('REQUEST_TIMEOUT', 10))

REFRESH_INTERVAL_MS = int(os.environ.get('REFRESH_INTERVAL_MS', 5 * 60 * 1000))

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
