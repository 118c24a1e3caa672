"""Aura: small numeric toolkit.

Pseudo-random sampling (`Random`), descriptive statistics (`Arithma`, also
exported as `Math`) and immutable 2D/3D vectors (`Vector2`, `Vector3`)
behind one flat namespace.
"""

from . import arithma as Arithma
from . import rng as Random
from .errors import AuraError, DivisionByZeroError, ErrorKind, InvalidArgumentError
from .vector import Vector2, Vector3

Math = Arithma

__all__ = [
    "__version__",
    "Random",
    "Arithma",
    "Math",
    "Vector2",
    "Vector3",
    "AuraError",
    "ErrorKind",
    "InvalidArgumentError",
    "DivisionByZeroError",
]

__version__ = "1.1.0"
