import math


class InvalidInput(ValueError):
    """Raised when a form field fails to parse or fails its range check."""

    title = "Invalid Input"

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"title": self.title, "description": self.message}


class InputValidator:
    @staticmethod
    def is_blank(value):
        return value is None or (isinstance(value, str) and not value.strip())

    @staticmethod
    def parse_number(value):
        """
        Parses a form field into a finite float.
        Returns None when the field is blank or not a number.
        """
        if InputValidator.is_blank(value) or isinstance(value, bool):
            return None
        try:
            num = float(str(value).strip())
        except ValueError:
            return None
        if not math.isfinite(num):
            return None
        return num

    @staticmethod
    def parse_positive_number(value, message):
        num = InputValidator.parse_number(value)
        if num is None or num <= 0:
            raise InvalidInput(message)
        return num

    @staticmethod
    def parse_age(value):
        """Age must be a whole number of years greater than zero."""
        if InputValidator.is_blank(value) or isinstance(value, bool):
            raise InvalidInput("Please enter a valid age.")
        if isinstance(value, float):
            if not value.is_integer():
                raise InvalidInput("Please enter a valid age.")
            value = int(value)
        try:
            age = int(str(value).strip())
        except ValueError:
            raise InvalidInput("Please enter a valid age.")
        if age <= 0:
            raise InvalidInput("Please enter a valid age.")
        return age

    @staticmethod
    def validate_choice(value, choices, field, default=None):
        """
        Checks a select/radio value against its fixed options.
        Blank values fall back to the default when one is given.
        """
        if InputValidator.is_blank(value):
            if default is not None:
                return default
            raise InvalidInput(f"Please select a {field}.")
        value = str(value).strip()
        if value not in choices:
            raise InvalidInput(f"Please select a valid {field}.")
        return value
