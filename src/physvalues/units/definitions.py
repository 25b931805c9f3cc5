"""
physvalues.units.definitions
============================

Predefined units. Each one is a plain `Dimension` constant, so a quantity is
built by multiplying a number with it:

>>> distance = 589 * kilometer
>>> speed = 300 * (kilometer / hour)
>>> distance / speed
7068 s
"""

from physvalues.core.dimensions import Dimension

# ---------------------------------------------------------------------------
# Base SI Units
# ---------------------------------------------------------------------------
meter = Dimension(length=1, symbol="m")                     # Length
kilogram = Dimension(mass=1, symbol="kg")                   # Mass
second = Dimension(time=1, symbol="s")                      # Time
ampere = Dimension(current=1, symbol="A")                   # Electric current
kelvin = Dimension(temperature=1, symbol="K")               # Thermodynamic temperature
candela = Dimension(luminous_intensity=1, symbol="cd")      # Luminous intensity
mole = Dimension(amount=1, symbol="mol")                    # Amount of substance

# ---------------------------------------------------------------------------
# Scaled units
# ---------------------------------------------------------------------------
millimeter = Dimension(length=1, scale=1e-3, symbol="mm")
centimeter = Dimension(length=1, scale=1e-2, symbol="cm")
kilometer = Dimension(length=1, scale=1e3, symbol="km")

gram = Dimension(mass=1, scale=1e-3, symbol="g")

minute = Dimension(time=1, scale=60.0, symbol="min")
hour = Dimension(time=1, scale=60.0 * 60.0, symbol="h")
day = Dimension(time=1, scale=24.0 * 60.0 * 60.0, symbol="d")

# ---------------------------------------------------------------------------
# Temperature scales with an offset zero (reference: kelvin)
#   K = °C + 273.15
#   K = °F * 5/9 + 459.67 * 5/9
# ---------------------------------------------------------------------------
celsius = Dimension(temperature=1, shift=273.15, symbol="°C")
fahrenheit = Dimension(temperature=1, scale=5.0 / 9.0, shift=459.67 * 5.0 / 9.0, symbol="°F")

# ---------------------------------------------------------------------------
# Short names
# ---------------------------------------------------------------------------
mm = millimeter
cm = centimeter
m = meter
km = kilometer
g = gram
kg = kilogram
s = second
min = minute
h = hour
d = day
A = ampere
K = kelvin
cd = candela
mol = mole
degC = celsius
degF = fahrenheit

# (canonical name, aliases) in registration order
UNIT_NAMES = (
    ("meter", ("m", "meters", "metre", "metres")),
    ("millimeter", ("mm", "millimeters")),
    ("centimeter", ("cm", "centimeters")),
    ("kilometer", ("km", "kilometers")),
    ("kilogram", ("kg", "kilograms")),
    ("gram", ("g", "grams")),
    ("second", ("s", "sec", "seconds")),
    ("minute", ("min", "minutes")),
    ("hour", ("h", "hr", "hours")),
    ("day", ("d", "days")),
    ("ampere", ("A", "amp", "amperes")),
    ("kelvin", ("K",)),
    ("candela", ("cd",)),
    ("mole", ("mol", "moles")),
    ("celsius", ("°C", "degC", "deg_celsius")),
    ("fahrenheit", ("°F", "degF", "deg_fahrenheit")),
)

__all__ = [name for name, _ in UNIT_NAMES] + [
    "mm", "cm", "m", "km", "g", "kg", "s", "min", "h", "d",
    "A", "K", "cd", "mol", "degC", "degF",
    "UNIT_NAMES",
]
