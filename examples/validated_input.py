"""Keep asking until the number is between 1 and 10."""

from clytia import Clytia

cli = Clytia()

number = cli.validated_input("Please enter a number", "1-10", lambda n: 1 <= n <= 10, type=int)
print(f"Double your number is {number * 2}")
