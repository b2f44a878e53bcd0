# python3
"""In-memory registry of players and their scores."""

import unicodedata
from typing import Dict, Iterable, List, Tuple

import player as player_lib

MAX_NAME_LENGTH = 20


class Scoreboard(object):
  """Registers players and applies the win/loss scoring rule.

  Every player lives in a single map from id to `Player`, so a name can never
  exist without a score. Ids are allocated sequentially from 1 and never
  reused.
  """

  def __init__(self):
    self._players: Dict[player_lib.PlayerId, player_lib.Player] = {}
    self.next_id: player_lib.PlayerId = 1

  def __len__(self):
    return len(self._players)

  def __contains__(self, player_id):
    return player_id in self._players

  def Register(self, name: player_lib.Name) -> player_lib.PlayerId:
    """Adds a player with a score of 0 and returns the new id.

    Args:
      name: The display name. Compared case-sensitively against existing names.

    Returns:
      The id allocated to the player.

    Raises:
      EmptyNameError: The name is empty or only whitespace.
      NameTooLongError: The name has more than MAX_NAME_LENGTH characters.
      InvalidCharactersError: The name contains a control character.
      DuplicateNameError: A registered player already has this name.
    """
    ValidateName(name)
    if any(p.name == name for p in self._players.values()):
      raise DuplicateNameError(name)
    player_id = self.next_id
    self._players[player_id] = player_lib.Player(player_id, name, 0)
    self.next_id += 1
    return player_id

  def RecordResult(self, winner_id: player_lib.PlayerId) -> None:
    """Credits `winner_id` with a win; everyone else loses a point.

    Raises:
      UnknownPlayerError: No player has `winner_id`. Scores are untouched.
    """
    if winner_id not in self._players:
      raise UnknownPlayerError(winner_id)
    self._players = {
        player_id: p._replace(score=p.score + (1 if player_id == winner_id
                                               else -1))
        for player_id, p in self._players.items()
    }

  def SnapshotOrderedById(self) -> List[player_lib.Player]:
    return sorted(self._players.values(), key=lambda p: p.id)

  def SnapshotNamesOrderedById(
      self) -> List[Tuple[player_lib.PlayerId, player_lib.Name]]:
    return [(p.id, p.name) for p in self.SnapshotOrderedById()]

  def Standings(self) -> List[player_lib.Player]:
    """Returns players by descending score; ties keep id order."""
    return sorted(self._players.values(), key=lambda p: (-p.score, p.id))


def ValidateName(name: player_lib.Name) -> None:
  """Raises a ValidationError if `name` can't be used as a player name."""
  if not name.strip():
    raise EmptyNameError(name)
  if len(name) > MAX_NAME_LENGTH:
    raise NameTooLongError(name)
  if any(_IsControl(c) for c in name):
    raise InvalidCharactersError(name)


def _IsControl(c):
  return unicodedata.category(c) == 'Cc'


def RegisterAll(board: Scoreboard,
                names: Iterable[player_lib.Name]) -> List[player_lib.PlayerId]:
  """Registers each of `names` in order, stopping at the first failure."""
  return [board.Register(name) for name in names]


class Error(Exception):
  pass


class ValidationError(Error, ValueError):
  """A player name was rejected."""

  def __init__(self, name, message):
    super().__init__(message)
    self.name = name


class EmptyNameError(ValidationError):
  """The player name is empty."""

  def __init__(self, name):
    super().__init__(name, 'Player name must not be empty.')


class NameTooLongError(ValidationError):
  """The player name has too many characters."""

  def __init__(self, name):
    super().__init__(
        name, f'Player name is too long ({len(name)} characters); '
        f'the limit is {MAX_NAME_LENGTH}.')


class InvalidCharactersError(ValidationError):
  """The player name contains a control character."""

  def __init__(self, name):
    super().__init__(name, 'Player name must not contain control characters.')


class DuplicateNameError(ValidationError):
  """Another player already has this name."""

  def __init__(self, name):
    super().__init__(
        name, f"Player name '{name}' already exists; choose a different one.")


class UnknownPlayerError(Error, LookupError):
  """No player is registered under the given id."""

  def __init__(self, player_id):
    super().__init__(f'Player {player_id} does not exist.')
    self.player_id = player_id
