import functools
import numbers

from complexmath import _ieee


def _operator(method):
    """Wrap a Complex-only method as a binary dunder that defers on foreign types."""
    @functools.wraps(method)
    def op(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return method(self, other)
    return op


def _require_real(value, name: str) -> None:
    if not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")


class Complex:
    """
    An immutable complex number  real + imaginary·i  over IEEE-754 doubles.

    Constructors
    ------------
    Complex(a, b)              -> a + b i
    Complex.from_builtin(z)    -> from a Python ``complex``

    Every operation returns a new instance; operands are never touched.
    Nothing here raises on degenerate input: dividing by the zero complex or
    overflowing exp() yields inf / NaN components the way float hardware does.
    """

    __slots__ = ("_real", "_imaginary")

    # ---------- construction ----------
    def __init__(self, real: float, imaginary: float):
        """
        Both parts must be real numbers (int, float, Fraction, numpy scalars);
        they are coerced with float(). Text is refused, and an int outside
        the double range raises OverflowError from that coercion.
        """
        _require_real(real, "real")
        _require_real(imaginary, "imaginary")
        self._real = float(real)
        self._imaginary = float(imaginary)

    @classmethod
    def from_builtin(cls, z: complex) -> "Complex":
        """Build from a Python ``complex`` (or anything with .real / .imag)."""
        return cls(z.real, z.imag)

    # ---------- accessors ----------
    @property
    def real(self) -> float:
        return self._real

    @property
    def imaginary(self) -> float:
        return self._imaginary

    # ---------- arithmetic ----------
    def add(self, b: "Complex") -> "Complex":
        """(a+bi) + (c+di) = (a+c) + (b+d)i"""
        return Complex(self._real + b.real, self._imaginary + b.imaginary)

    def subtract(self, b: "Complex") -> "Complex":
        """(a+bi) - (c+di) = (a-c) + (b-d)i"""
        return Complex(self._real - b.real, self._imaginary - b.imaginary)

    def multiply(self, b: "Complex") -> "Complex":
        """(a+bi)(c+di) = (ac-bd) + (bc+ad)i"""
        return Complex(self._real * b.real - self._imaginary * b.imaginary,
                       self._imaginary * b.real + self._real * b.imaginary)

    def divide(self, b: "Complex") -> "Complex":
        """
        (a+bi) / (c+di) = ((ac+bd) + (bc-ad)i) / (c²+d²)

        A zero divisor is not rejected: the components come out as ±inf or
        NaN, exactly as the float division would give them.
        """
        divisor = b.real * b.real + b.imaginary * b.imaginary
        return Complex(
            _ieee.div(self._real * b.real + self._imaginary * b.imaginary, divisor),
            _ieee.div(self._imaginary * b.real - self._real * b.imaginary, divisor),
        )

    def scale(self, n: float) -> "Complex":
        """
        Stretch or shrink: both parts multiplied by n.

        n is used as a double, so an int too large for one raises OverflowError.
        """
        _require_real(n, "n")
        n = float(n)
        return Complex(n * self._real, n * self._imaginary)

    def conjugate(self) -> "Complex":
        return Complex(self._real, -self._imaginary)

    def is_zero(self) -> bool:
        # exact compare, -0.0 counts as zero
        return self._real == 0.0 and self._imaginary == 0.0

    def reciprocal(self) -> "Complex":
        """1 / z. The zero complex gives inf / NaN parts, same as divide()."""
        scale = self._real * self._real + self._imaginary * self._imaginary
        return Complex(_ieee.div(self._real, scale), _ieee.div(-self._imaginary, scale))

    # ---------- transcendental ----------
    def exponential(self) -> "Complex":
        """e^(a+bi) = e^a (cos b + i sin b)"""
        return Complex(_ieee.exp(self._real) * _ieee.cos(self._imaginary),
                       _ieee.exp(self._real) * _ieee.sin(self._imaginary))

    def sin(self) -> "Complex":
        return Complex(_ieee.sin(self._real) * _ieee.cosh(self._imaginary),
                       _ieee.cos(self._real) * _ieee.sinh(self._imaginary))

    def cos(self) -> "Complex":
        return Complex(_ieee.cos(self._real) * _ieee.cosh(self._imaginary),
                       -_ieee.sin(self._real) * _ieee.sinh(self._imaginary))

    def tan(self) -> "Complex":
        return self.sin().divide(self.cos())

    # ---------- magnitude ----------
    def abs(self) -> float:
        """|z|, via hypot so huge or tiny parts don't overflow when squared."""
        return _ieee.hypot(self._real, self._imaginary)

    # ---------- dunder sugar ----------
    __add__ = _operator(add)
    __sub__ = _operator(subtract)
    __mul__ = _operator(multiply)
    __truediv__ = _operator(divide)
    __abs__ = abs

    def __neg__(self) -> "Complex":
        return self.scale(-1.0)

    def __complex__(self) -> complex:
        return complex(self._real, self._imaginary)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self._real == other.real and self._imaginary == other.imaginary

    def __hash__(self) -> int:
        return hash((self._real, self._imaginary))

    def __str__(self) -> str:
        if self._imaginary == 0:
            return repr(self._real)
        if self._real == 0:
            return f"{self._imaginary!r}i"
        if self._imaginary < 0:
            return f"{self._real!r}-{-self._imaginary!r}i"
        return f"{self._real!r}+{self._imaginary!r}i"

    # readable REPL / print-outs
    def __repr__(self) -> str:
        return f"Complex(real={self._real!r}, imaginary={self._imaginary!r})"

