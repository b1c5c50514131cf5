from contextlib import contextmanager
from copy import copy
from typing import Literal, Optional, Sequence, TypedDict

Config = TypedDict(
    "Config",
    {
        "canvas": Optional[Sequence[float]],
        "precision": Optional[int],
    },
)

# https://github.com/python/mypy/issues/6262
CONFIG_KEYS = Literal[
    "canvas",
    "precision",
]


_default_config: Config = {
    "canvas": None,
    "precision": None,
}

config = copy(_default_config)


def reset_config():
    for key, value in _default_config.items():
        set_config(key, value)  # type: ignore


def set_config(key: CONFIG_KEYS, value):
    if key in config:
        config[key] = value
    else:
        raise KeyError(f"Non existing config '{key}'")


def get_config(key: Optional[CONFIG_KEYS] = None):
    if key is None:
        return config
    elif key in config:
        return config[key]  # type: ignore
    else:
        raise KeyError(f"Non existing config '{key}'")


@contextmanager
def config_context(*args):
    """Set some config items for within a certain context. Code borrowed partly from
    pandas."""
    if len(args) % 2 != 0 or len(args) < 2:
        raise ValueError(
            "Need to invoke as config_context(key, value, [(key, value), ...])."
        )

    configs = list(zip(args[::2], args[1::2]))

    undo = {key: get_config(key) for key, _ in configs}
    try:
        for key, value in configs:
            set_config(key, value)

        yield

    finally:
        for key, value in undo.items():
            set_config(key, value)
