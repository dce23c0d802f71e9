class TranslationError(ValueError):
    """
    Base for all errors raised translating a flat job record.
    """

    pass


class StructuralViolation(TranslationError):
    pass


class TooManyBlocks(StructuralViolation):
    """
    A list that stands in for an optional value has more than one entry.
    """

    def __init__(self, block, parent="command"):
        self.block = block
        self.parent = parent
        super().__init__(f"rundeck {parent} may have no more than one {block}")


class TooManyNotificationBlocks(StructuralViolation):
    def __init__(self, count):
        self.count = count
        super().__init__(
            "can only have up to three notification blocks, `on_success`, `on_failure`, `on_start`"
            f" (found {count})"
        )


class TooManyNotificationPlugins(StructuralViolation):
    def __init__(self, trigger=None):
        self.trigger = trigger
        super().__init__("rundeck notification may have no more than one notification plugin")


class FieldInvariantViolation(TranslationError):
    pass


class MalformedSchedule(TranslationError):
    """
    The schedule text does not split into the seven cron fields.
    """

    def __init__(self, text, help_url=None):
        self.text = text
        message = f"schedule '{text}' must be formatted like a 7 field cron expression"
        if help_url:
            message += f", as defined here: {help_url}"
        super().__init__(message)


class InvalidScheduleFields(FieldInvariantViolation):
    def __init__(self, text, day_of_month, day_of_week):
        self.day_of_month = day_of_month
        self.day_of_week = day_of_week
        super().__init__(
            f"invalid 'schedule' specification {text} - one of day-of-month (4th item, "
            f"'{day_of_month}') or day-of-week (6th, '{day_of_week}') must be '?'"
        )


class OptionValidationError(FieldInvariantViolation):
    """
    An option breaks a rule that relates two of its fields.
    """

    def __init__(self, message, name=None, index=None):
        self.name = name
        self.index = index
        super().__init__(f"option {index} ({name}): {message}")


class UnknownEnumValue(TranslationError):
    pass


class UnknownNotificationType(UnknownEnumValue):
    def __init__(self, value):
        self.value = value
        super().__init__(
            f"the notification type '{value}' is not one of `on_success`, `on_failure`, `on_start`"
        )


class DuplicateKey(TranslationError):
    pass


class DuplicateNotificationType(DuplicateKey):
    def __init__(self, trigger):
        self.trigger = trigger
        super().__init__(f"a notification block with {trigger} already exists")
