import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import yaml
from pymonad.either import Either, Left, Right

from radio_streams.domain.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "radio_streams.yml"
DIRECTORY_ENV_VAR = "RADIO_STREAMS_DIR"
DEFAULT_STREAMS_DIRECTORY = Path("External") / "internet-radio-streams"


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""
    streams_directory: Path
    log_level: str = "INFO"
    lang: Optional[str] = None


def load_config(config_file: Union[str, Path]) -> Either[ConfigError, dict]:
    """
    Reads a YAML configuration file.

    Recognised keys are `streams_directory`, `log_level` and `lang`. A relative
    `streams_directory` is resolved against the directory of the file.

    Returns:
        Either: A Right(dict of settings) or a Left(ConfigError).
    """
    path = Path(config_file)
    try:
        with open(path, "r", encoding="utf-8") as file:
            data = yaml.safe_load(file)
    except FileNotFoundError:
        return Left(ConfigError(f"Configuration file '{path}' not found."))
    except (yaml.YAMLError, OSError) as e:
        return Left(ConfigError(f"Could not read configuration file '{path}': {e}"))

    if data is None:
        data = {}
    if not isinstance(data, dict):
        return Left(ConfigError(f"Configuration file '{path}' must contain a mapping."))

    config = {key: data[key] for key in ("streams_directory", "log_level", "lang") if data.get(key)}
    if "log_level" in config:
        level = str(config["log_level"]).upper()
        if not isinstance(logging.getLevelName(level), int):
            return Left(ConfigError(f"Unknown log level '{config['log_level']}' in '{path}'."))
        config["log_level"] = level
    if "streams_directory" in config:
        directory = Path(str(config["streams_directory"])).expanduser()
        if not directory.is_absolute():
            directory = path.parent / directory
        config["streams_directory"] = directory
    logger.info(f"Configuration loaded from '{path}'.")
    return Right(config)


def resolve_settings(
    directory: Optional[Union[str, Path]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> Either[ConfigError, Settings]:
    """
    Builds the runtime settings.

    The streams directory is taken, in order, from the `directory` argument,
    the RADIO_STREAMS_DIR environment variable, the configuration file, and
    finally External/internet-radio-streams under the working directory.
    Without an explicit `config_file`, radio_streams.yml in the working
    directory is read when it exists.
    """
    if config_file is None and Path(DEFAULT_CONFIG_FILE).is_file():
        config_file = DEFAULT_CONFIG_FILE

    config_result = load_config(config_file) if config_file is not None else Right({})
    if config_result.is_left():
        return config_result
    config = config_result.value

    if directory is not None:
        streams_directory = Path(directory)
    elif os.environ.get(DIRECTORY_ENV_VAR):
        streams_directory = Path(os.environ[DIRECTORY_ENV_VAR])
    elif "streams_directory" in config:
        streams_directory = config["streams_directory"]
    else:
        streams_directory = Path.cwd() / DEFAULT_STREAMS_DIRECTORY

    return Right(
        Settings(
            streams_directory=streams_directory,
            log_level=str(config.get("log_level", "INFO")),
            lang=config.get("lang"),
        )
    )
