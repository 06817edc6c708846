import math

# below this magnitude the closed forms lose precision, use the Taylor expansion
TAYLOR_THRESHOLD = 1e-8


def log1p_ratio(x: float) -> float:
    """
    Compute `log(1 + x) / x`. A Taylor series expansion is used if x is close to 0.
    """
    if x <= -1.0:
        # limit of log(1 + x) / x, math.log1p raises here
        return math.inf
    if abs(x) > TAYLOR_THRESHOLD:
        return math.log1p(x) / x
    return 1.0 - x * (0.5 - x * (0.33333333333333333 - 0.25 * x))


def expm1_ratio(x: float) -> float:
    """
    Compute `(exp(x) - 1) / x`. A Taylor series expansion is used if x is close to 0.
    """
    if abs(x) > TAYLOR_THRESHOLD:
        return math.expm1(x) / x
    return 1.0 + x * 0.5 * (1.0 + x * 0.33333333333333333 * (1.0 + 0.25 * x))


def h(x: float, exponent: float) -> float:
    """
    Compute `h(x) = 1 / x^exponent`.
    """
    return math.exp(-exponent * math.log(x))


def h_integral(x: float, exponent: float) -> float:
    """
    Compute `H(x)`, the integral function of `h(x)`:

    - `(x^(1 - exponent) - 1) / (1 - exponent)` if exponent != 1
    - `log(x)` if exponent == 1
    """
    log_x = math.log(x)
    return expm1_ratio((1.0 - exponent) * log_x) * log_x


def h_integral_inverse(x: float, exponent: float) -> float:
    """
    Inverse of `H(x)`, returns the `y` for which `H(y) = x`.
    """
    t = x * (1.0 - exponent)
    if t < -1.0:
        # t can drop below -1 in rare cases due to numerical errors
        t = -1.0
    return math.exp(log1p_ratio(t) * x)
