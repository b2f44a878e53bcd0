# python3
"""Interactive scoreboard: register players, then record winners."""

import contextlib
import sys

from absl import app
from absl import flags
from absl import logging

import scoreboard

MAX_INPUT_LENGTH = 50
MAX_PLAYER_ID = 1000
SENTINEL = 'done'
FLAGS = flags.FLAGS

flags.DEFINE_list('players', [],
                  'Comma-separated player names to register before prompting.')
flags.DEFINE_bool(
    'tabprint', False, 'Write tab-separated scoreboard rows.', short_name='t')
flags.DEFINE_enum('order', 'id', ['id', 'score'],
                  'Order scoreboard rows by player id or by score.')

MENU = """Choose an action:
1. Record a game result (enter the winner's id)
2. Show the scoreboard
3. List players
4. Exit"""


def GetInput(prompt, stdin=sys.stdin, stdout=sys.stdout) -> str:
  """Prompts for and reads one trimmed line.

  Raises:
    EndOfInputError: The input stream is exhausted.
    InputStreamError: Reading input or flushing the prompt failed.
    InputTooLongError: The trimmed line exceeds MAX_INPUT_LENGTH characters.
  """
  try:
    stdout.write(prompt)
    stdout.flush()
  except OSError as e:
    raise InputStreamError('Failed to flush the output buffer.') from e
  try:
    line = stdin.readline()
  except (OSError, UnicodeDecodeError) as e:
    raise InputStreamError(
        'Failed to read input; the stream may be broken or interrupted.'
    ) from e
  if not line:
    raise EndOfInputError('Input stream ended (EOF).')
  text = line.strip()
  if len(text) > MAX_INPUT_LENGTH:
    raise InputTooLongError(
        f'Input is too long; limit it to {MAX_INPUT_LENGTH} characters.')
  return text


def GetInputSafe(prompt,
                 stdin=sys.stdin,
                 stdout=sys.stdout,
                 stderr=sys.stderr) -> str:
  """Like GetInput, but retries until the input is usable.

  Only a FatalInputError escapes.
  """
  while True:
    try:
      return GetInput(prompt, stdin, stdout)
    except InputTooLongError as e:
      print(f'Input error: {e}', file=stderr)
      print('Please try again or press Ctrl+C to exit.', file=stderr)


def ParseWinnerId(text: str) -> int:
  """Parses a winner id typed at the prompt.

  Raises:
    WinnerIdError: `text` is not an integer in [1, MAX_PLAYER_ID].
  """
  if not text:
    raise WinnerIdError('Input must not be empty!')
  if not (text.isascii() and text.isdigit()):
    raise WinnerIdError('Please enter a valid positive integer!')
  winner_id = int(text)
  if winner_id == 0:
    raise WinnerIdError('Player id must be greater than 0!')
  if winner_id > MAX_PLAYER_ID:
    raise WinnerIdError('Player id is too large; enter a reasonable id!')
  return winner_id


def PrintScoreboard(players, stream=sys.stdout, tabprint=False):
  """Print a table of ids, names and scores to the given stream."""
  with contextlib.redirect_stdout(stream):
    if tabprint:
      for p in players:
        print(f'{p.id}\t{p.name}\t{p.score}')
      return
    print()
    print('=== Scoreboard ===')
    print(f'{"ID":<4} {"Player":<15} {"Score":<6}')
    print('-' * 30)
    for p in players:
      print(f'{p.id:<4} {p.name:<15} {p.score:<6}')
    print()


def PrintPlayers(listing, stream=sys.stdout):
  with contextlib.redirect_stdout(stream):
    print()
    print('=== Players ===')
    for player_id, name in listing:
      print(f'{player_id}: {name}')
    print()


class Session(object):
  """Drives a Scoreboard from a pair of text streams."""

  def __init__(self,
               board: scoreboard.Scoreboard,
               stdin=sys.stdin,
               stdout=sys.stdout,
               stderr=sys.stderr,
               tabprint=False,
               order='id'):
    self.board = board
    self.stdin = stdin
    self.stdout = stdout
    self.stderr = stderr
    self.tabprint = tabprint
    self.order = order

  def _Read(self, prompt):
    return GetInputSafe(prompt, self.stdin, self.stdout, self.stderr)

  def _Print(self, *args):
    print(*args, file=self.stdout)

  def ShowScoreboard(self):
    if self.order == 'score':
      players = self.board.Standings()
    else:
      players = self.board.SnapshotOrderedById()
    PrintScoreboard(players, stream=self.stdout, tabprint=self.tabprint)

  def ShowPlayers(self):
    PrintPlayers(self.board.SnapshotNamesOrderedById(), stream=self.stdout)

  def RegisterPlayers(self):
    """Reads player names until the sentinel, once at least one exists."""
    while True:
      name = self._Read(
          f"Enter a player name ('{SENTINEL}' to finish registration): ")
      if name.lower() == SENTINEL:
        if not len(self.board):
          self._Print('At least one player is required!')
          continue
        return
      try:
        player_id = self.board.Register(name)
      except scoreboard.ValidationError as e:
        self._Print(f'Failed to add player: {e}')
        continue
      logging.debug('Registered %r as player %d.', name, player_id)
      self._Print(f"Player '{name}' added with id {player_id}.")

  def RecordResult(self):
    self.ShowPlayers()
    text = self._Read("Enter the winning player's id: ")
    try:
      winner_id = ParseWinnerId(text)
      self.board.RecordResult(winner_id)
    except WinnerIdError as e:
      self._Print(e)
      return
    except scoreboard.UnknownPlayerError as e:
      self._Print(f'Error: {e}')
      return
    logging.debug('Recorded a win for player %d.', winner_id)
    self._Print('Scores updated!')
    self.ShowScoreboard()

  def PlayRounds(self):
    """Runs the menu loop until the user chooses to exit."""
    while True:
      self._Print(MENU)
      choice = self._Read('Enter your choice (1-4): ')
      if choice == '1':
        self.RecordResult()
      elif choice == '2':
        self.ShowScoreboard()
      elif choice == '3':
        self.ShowPlayers()
      elif choice == '4':
        self._Print('Thanks for using the scoreboard. Goodbye!')
        return
      else:
        self._Print('Invalid choice; enter a number from 1 to 4.')

  def Run(self):
    self._Print('Welcome to the game scoreboard!')
    self._Print('First, register the names of everyone playing.')
    self.RegisterPlayers()
    self._Print()
    self._Print('Player registration complete!')
    self.ShowPlayers()
    self.ShowScoreboard()
    self.PlayRounds()


def Main(argv):
  """Register players, then record results until the user exits."""
  if len(argv) > 1:
    raise app.UsageError('Too many command-line arguments.')
  board = scoreboard.Scoreboard()
  try:
    scoreboard.RegisterAll(board, FLAGS.players)
  except scoreboard.ValidationError as e:
    raise app.UsageError(f'--players: {e}')
  session = Session(
      board,
      sys.stdin,
      sys.stdout,
      sys.stderr,
      tabprint=FLAGS.tabprint,
      order=FLAGS.order)
  try:
    session.Run()
  except FatalInputError as e:
    logging.error('Input failed: %s', e)
    print(f'Input error: {e}', file=sys.stderr)
    print('Exiting.', file=sys.stderr)
    sys.exit(1)


def Run():
  app.run(Main)


class Error(Exception):
  pass


class InputError(Error):
  """A line of input could not be used."""


class InputTooLongError(InputError):
  """The trimmed input line is longer than MAX_INPUT_LENGTH."""


class WinnerIdError(InputError):
  """The winner id is not a usable number."""


class FatalInputError(InputError):
  """The input stream can't produce any more lines."""


class EndOfInputError(FatalInputError):
  """The input stream reached end of file."""


class InputStreamError(FatalInputError):
  """Reading from the input stream failed."""


if __name__ == '__main__':
  Run()
