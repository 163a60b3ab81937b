"""Fill a progress bar over roughly ten seconds."""

import time

from clytia import Clytia

cli = Clytia()
counter = 0


def work() -> None:
    global counter
    while counter < 10_000:
        time.sleep(0.001)
        counter += 1


cli.progress_bar("Waiting for 10 seconds (ish)", lambda: counter // 100, work).unwrap()
