import yaml


def read_yaml(filename):
    """
    Read yaml from file
    """
    with open(filename, "r") as fd:
        content = yaml.safe_load(fd)
    return content


def write_yaml(obj, filename):
    """
    Write yaml to file
    """
    with open(filename, "w") as fd:
        yaml.safe_dump(obj, fd, sort_keys=False)


def dump_yaml(obj):
    """
    Dump yaml to a string, keeping the key order we built
    """
    return yaml.safe_dump(obj, sort_keys=False, default_flow_style=False)


def pretty_print_list(listing):
    """
    Pretty print a list of json (python dictionaries), scalars only
    """
    if not isinstance(listing, list):
        listing = [listing]
    result = ""
    for i, item in enumerate(listing):
        result += "".join(
            f"({k}:{v})," for k, v in item.items() if not isinstance(v, (list, dict))
        )
        if len(listing) > 1 and i != len(listing) - 1:
            result += "\n"
    return result.strip(",")
