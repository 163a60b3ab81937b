"""Check any number of animals with Space, confirm with Enter."""

from clytia import Clytia

cli = Clytia()

print("What animal do you like?")
choices = cli.multichoice(["cats", "dogs", "birds"])
if len(choices) < 3:
    print("What, you don't like all of them?")
else:
    print("Correct choice!")
