from services.statuses import statuses_bp
from services.chat import chat_bp

ALL_BLUEPRINTS = [statuses_bp, chat_bp]
