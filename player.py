# python3
"""Player datatype."""
from typing import NamedTuple, Text

PlayerId = int
Name = Text


class Player(NamedTuple):
  id: PlayerId
  name: Name
  score: int
