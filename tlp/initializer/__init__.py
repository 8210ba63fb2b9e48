# flake8: noqa

from .weights import (
    constant,
    normal,
    uniform,
)
