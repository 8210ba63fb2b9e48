# flake8: noqa

from ._version import version as __version__

from .core.exception import InvalidArgument
from .core.network import init, TwoLayerPerceptron
from .core.session import TrainingSession
