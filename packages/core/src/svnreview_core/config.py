import os
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_CONFIG: dict = {
    "svn_command": "svn",
    "output_dir": ".",
    "template": None,  # None = built-in review record template; set to a path string to override
    "pdf": False,
}


def load_config(config_path: str = ".svnreview.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .svnreview.yml in the current directory
      3. SVNREVIEW_SVN environment variable (svn executable)
      4. CLI argument overrides
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        config.update(file_config)

    svn_command = os.environ.get("SVNREVIEW_SVN")
    if svn_command:
        config["svn_command"] = svn_command

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    return config


def load_template(config: dict) -> Optional[str]:
    """
    Load a custom report template.

    If ``template`` is set in config, returns the file's contents (path relative
    to cwd). Returns None when unset so the built-in template is used.
    """
    custom_path = config.get("template")
    if not custom_path:
        return None
    p = Path(custom_path)
    if not p.exists():
        raise FileNotFoundError(f"Template file not found: {custom_path}")
    return p.read_text()
