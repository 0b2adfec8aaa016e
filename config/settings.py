import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    APP_NAME = os.getenv('APP_NAME', 'BMI & Calorie QuickCheck')

    # Logging level name for logging.basicConfig (DEBUG logs every calculation)
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    PORT = int(os.getenv('PORT', '5000'))

    # Unit system tab selected when the form first loads
    DEFAULT_UNIT = os.getenv('DEFAULT_UNIT', 'metric')
