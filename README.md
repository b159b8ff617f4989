# handycalc

A collection of small calculators for everyday arithmetic, geometry,
number series, money matters, basic physics and simple classification
tasks. Every calculator is a plain Python function, so you can use them in
your own code. One command runs three interactive programs at the
terminal.

## Installation

```
pip install handycalc
```

Python 3.10 or newer is required. The package has no third-party
dependencies.

## Command line

The `handycalc` command takes the name of the program to run:

```
handycalc calculator
handycalc scientific
handycalc vending
```

- `calculator` asks for an operator (`+`, `-`, `*`, `/`) and two numbers
  and prints the result to two decimal places.
- `scientific` shows a menu of eleven choices: addition, subtraction,
  multiplication, division, sine, cosine and tangent of an angle in
  degrees, natural logarithm, square root, power, and exit. It keeps
  asking until you choose 11.
- `vending` lists four items (Soda ₹30, Chips ₹20, Chocolate ₹25,
  Water ₹15), asks for a choice and a quantity, then asks for money until
  the cost is covered and prints the change. An unknown item number costs
  nothing.

Answers are read as whitespace-separated values, so they can also be
piped in:

```
printf '+ 2 3\n' | handycalc calculator
```

If the input ends early or a value cannot be read as a number, the
command prints an error to standard error and exits with status 1.

## Library use

The calculators are grouped into modules:

| Module                 | What it covers |
|------------------------|----------------|
| `handycalc.geometry`   | polygon angles, triangle checks, areas, volumes, Pythagoras, squares, cubes and square roots |
| `handycalc.series`     | arithmetic, harmonic and geometric progressions, natural and harmonic sums, factorials |
| `handycalc.finance`    | simple and compound interest, tax brackets, income classes, INR currency rates, profit and loss, fuel bills, whether an item can be bought |
| `handycalc.physics`    | ideal gas pressure, Ohm's law, series resistance, Raoult's law, temperature conversion |
| `handycalc.patterns`   | star pyramids and multiplication tables as lists of lines |
| `handycalc.classify`   | age, days in a month, grade reports and letter grades, parity, leap years, smallest and largest of three, weather advice, vowels and consonants, averages |
| `handycalc.calculator` | the `Operation` enum and `calculate`, trigonometry in degrees, natural logarithm, power |
| `handycalc.vending`    | the `Item` enum, `item_cost`, `total_price` and the `Payment` class |
| `handycalc.cli`        | the `handycalc` command (`main`) |

A few examples:

```python
from handycalc.geometry import hypotenuse, circle_area
from handycalc.series import factorial, natural_sum
from handycalc.classify import is_leap_year, days_in_month
from handycalc.physics import celsius_to_fahrenheit
from handycalc.finance import tax_bracket, TaxBracket

hypotenuse(3, 4)            # 5.0
factorial(5)                # 120
natural_sum(10)             # 55
is_leap_year(2024)          # True
days_in_month(2)            # (28, 29)
celsius_to_fahrenheit(100)  # 212.0
tax_bracket(400_000)        # TaxBracket.FIVE
```

Payments in the vending machine are collected step by step:

```python
from handycalc.vending import Payment, item_cost, total_price

payment = Payment(total_price(item_cost(1), 2))  # two sodas: 60.0
payment.insert(50)                                # returns 10.0 still due
payment.insert(20)                                # returns 0.0
payment.change                                    # 10.0
```

Invalid input is reported with an exception rather than a message: a
negative radius, a polygon with fewer than three sides, a common ratio
outside (-1, 1) or an unknown operator raise `ValueError`; a zero
resistance or a division by zero raises `ZeroDivisionError`.

```python
from handycalc.series import infinite_gp_sum

try:
    infinite_gp_sum(1, 2)
except ValueError as error:
    print(error)
```

## What it does not do

Only the basic calculator, the scientific calculator and the vending
machine have an interactive command. The geometry, series, finance,
physics, pattern and classification calculators are available as library
functions only.

## Running the tests

From a checkout of the project:

```
pip install -e ".[test]"
pytest
```