"""Ask for a number once."""

from clytia import Clytia, InputRequiredError, ParseError

cli = Clytia()

try:
    number = cli.parsed_input("Please enter a number", type=int)
except (InputRequiredError, ParseError):
    print("You didn't enter a number!")
else:
    print(f"Double your number is {number * 2}")
