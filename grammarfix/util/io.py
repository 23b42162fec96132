import json
import os
import tempfile
from pathlib import Path
from typing import Any

import appdirs

APP_NAME = "grammarfix"
DEFAULT_DATA_DIR = Path(appdirs.user_data_dir(APP_NAME))
DEFAULT_SESSION_FILE = DEFAULT_DATA_DIR / "user.json"
DEFAULT_CONFIG_FILE = Path(appdirs.user_config_dir(APP_NAME)) / "config.json"


def read_json(fpath: str | Path) -> Any:
    """Read and return data from a JSON file.

    Args:
        fpath: Path to the JSON file.

    Returns:
        Data loaded from the JSON file.
    """
    with open(fpath, "r", encoding="utf-8") as f:
        return json.load(f)


def write_json(data: Any, fpath: str | Path) -> None:
    """Write data to a JSON file, replacing it as a whole.

    The data is written to a temporary file in the same directory first and
    then moved over `fpath`, so readers see either the old or the new file.

    Args:
        data: Data to write to the JSON file.
        fpath: Path to the JSON file.
    """
    fpath = Path(fpath)
    fpath.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=fpath.parent, prefix=f".{fpath.name}.")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=4, ensure_ascii=False)
        os.replace(tmp_name, fpath)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
