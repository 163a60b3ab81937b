"""Spin for ten seconds next to a fixed message."""

import time

from clytia import Clytia

cli = Clytia()

outcome = cli.static_background_spinner("A delay for 10 seconds", lambda: time.sleep(10))
outcome.unwrap()
