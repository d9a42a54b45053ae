"""
Self-check harness: run every operation on two sample values and log it.

    python -m complexmath.demo
"""
import logging

from complexmath.complex import Complex

logger = logging.getLogger(__name__)

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
SAMPLE_A = (5.0, 6.0)
SAMPLE_B = (-3.0, 4.0)
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def run(a: Complex, b: Complex) -> dict:
    """Evaluate the full operation set on a and b; log and return each result."""
    results = {
        "a": a,
        "b": b,
        "real(a)": a.real,
        "imaginary(a)": a.imaginary,
        "b + a": b.add(a),
        "a - b": a.subtract(b),
        "a * b": a.multiply(b),
        "b * a": b.multiply(a),
        "a / b": a.divide(b),
        "(a / b) * b": a.divide(b).multiply(b),
        "conjugate(a)": a.conjugate(),
        "reciprocal(a)": a.reciprocal(),
        "|a|": a.abs(),
        "exp(a)": a.exponential(),
        "sin(a)": a.sin(),
        "cos(a)": a.cos(),
        "tan(a)": a.tan(),
    }
    for label, value in results.items():
        logger.info("%-13s = %s", label, value)
    return results


def main() -> None:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    run(Complex(*SAMPLE_A), Complex(*SAMPLE_B))


if __name__ == "__main__":
    main()
