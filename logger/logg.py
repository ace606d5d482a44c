import logging
import os
from datetime import datetime, timezone
from pythonjsonlogger import jsonlogger
from dotenv import load_dotenv
from core.config import settings

load_dotenv()


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            now = datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.%fZ')
            log_record['timestamp'] = now
        if log_record.get('level'):
            log_record['level'] = log_record['level'].upper()
        else:
            log_record['level'] = record.levelname


LOG_LEVEL = settings.LOG_LEVEL
LOGS_JOURNAL_PATH = settings.LOGS_JOURNAL_NAME

logs_file_formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(pathname)s: %(message)s')
console_formatter = CustomJsonFormatter('\033[94m %(level)s %(pathname)s: %(message)s \033[0m')


# init default logger
logger = logging.getLogger("cart")

# define format for logs in the console and where to stream logs
logHandler = logging.StreamHandler()
logHandler.setFormatter(console_formatter)
logger.setLevel(LOG_LEVEL)
logger.addHandler(logHandler)

# write to the logs journal only when a path is configured
if LOGS_JOURNAL_PATH:
    file_handler = logging.FileHandler(
        filename=os.path.normpath(LOGS_JOURNAL_PATH),
        mode="a"
    )
    file_handler.setLevel(LOG_LEVEL)
    file_handler.setFormatter(logs_file_formatter)
    logger.addHandler(file_handler)
