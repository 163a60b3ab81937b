"""Pick one animal with the arrow keys."""

from clytia import Clytia

cli = Clytia()

print("What animal do you like?")
choice = cli.options_menu(["cats", "dogs", "both"])
if choice == "cats":
    print("What about dogs?")
elif choice == "dogs":
    print("But what about cats?")
else:
    print("Good choice!")
