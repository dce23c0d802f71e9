from rundeckjob.errors import OptionValidationError
from rundeckjob.types import Option, Options

# Flat keys that are strings and booleans, copied across as they are
string_fields = [
    "name",
    "label",
    "default_value",
    "value_choices_url",
    "validation_regex",
    "description",
    "multi_value_delimiter",
    "storage_path",
    "date_format",
]
bool_fields = [
    "require_predefined_choice",
    "required",
    "allow_multiple_values",
    "obscure_input",
    "exposed_to_scripts",
    "is_date",
]


def from_flat(records, preserve_order=False):
    """
    Build an Options set from flat option records, in order.

    preserve_order comes from a sibling attribute of the job, not from the
    options themselves. The first option that fails validation stops us.
    """
    options = Options(preserve_order=bool(preserve_order))
    for index, record in enumerate(records or []):
        options.options.append(option_from_flat(record, index))
    return options


def option_from_flat(record, index=0):
    option = Option()
    for key in string_fields:
        setattr(option, key, record.get(key) or "")
    for key in bool_fields:
        setattr(option, key, bool(record.get(key, False)))
    validate(option, index)

    for choice in record.get("value_choices") or []:
        if choice is None:
            raise OptionValidationError(
                'argument "value_choices" can not have empty values; try "required"',
                option.name,
                index,
            )
        option.value_choices.append(choice)
    return option


def validate(option, index=0):
    """
    Check the rules between fields of one option.
    """
    if option.storage_path and not option.obscure_input:
        raise OptionValidationError(
            'argument "obscure_input" must be set to `true` when "storage_path" is not empty',
            option.name,
            index,
        )
    if option.exposed_to_scripts and not option.obscure_input:
        raise OptionValidationError(
            'argument "obscure_input" must be set to `true` when "exposed_to_scripts" is set to true',
            option.name,
            index,
        )
    if option.is_date and not option.date_format:
        raise OptionValidationError(
            'if "is_date" is set, you must set "date_format" (in momentjs)',
            option.name,
            index,
        )


def to_flat(options):
    """
    Copy an Options set back to flat records. This does not validate.
    """
    records = []
    for option in options.options:
        record = {key: getattr(option, key) for key in string_fields + bool_fields}
        record["value_choices"] = list(option.value_choices)
        records.append(record)
    return records
