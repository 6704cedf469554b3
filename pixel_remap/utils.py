import configparser
import copy
import logging
import os

from .errors import InvalidArgument

log = logging.getLogger(__name__)

lib_dir = os.path.abspath(os.path.dirname(__file__))
default_config_file = os.path.join(lib_dir, 'pixel_remap.ini')


def read_ini_file(file_path):
    """
    Load a pixel_remap settings file.

    Args:
        file_path (str): INI file with any of the [rotation], [convolution],
            [pattern] and [logging] sections.

    Returns:
        dict: {section: {key: typed value}}. Raises InvalidArgument when the
        file is missing or has no section headers.
    """
    if not os.path.isfile(file_path):
        raise InvalidArgument(f"Config file not found: {file_path}")

    config = configparser.ConfigParser()
    try:
        config.read(file_path)
    except configparser.Error as e:
        raise InvalidArgument(f"Unable to parse config file {file_path}: {e}")

    ini_data = {}
    for section in config.sections():
        ini_data[section] = {key: parse_value(value) for key, value in config.items(section)}

    return ini_data


def parse_value(value):
    """
    Convert one INI value to the type the settings need.

    "5, 5" (a rotation center) becomes a list, numbers become int or float,
    True/False become bool and None becomes None. Anything else, such as an
    interpolation mode name, stays a string.
    """
    value = value.strip()

    if ',' in value:
        return [parse_value(v) for v in value.split(',')]

    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            continue

    if value.lower() in ('true', 'false'):
        return value.lower() == 'true'

    if value.lower() == 'none':
        return None

    return value


def merge_config(defaults, overrides):
    """Overlay the sections of overrides onto a copy of defaults, key by key."""
    merged = copy.deepcopy(defaults)
    for section, values in overrides.items():
        merged.setdefault(section, {}).update(values)
    return merged


def load_default_config():
    return read_ini_file(default_config_file)


def load_config(config_file=None):
    """Packaged defaults, overlaid with config_file when one is given."""
    config = load_default_config()
    if config_file is not None:
        log.info(f"Config file: {config_file}")
        config = merge_config(config, read_ini_file(config_file))
    return config
