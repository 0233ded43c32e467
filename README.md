# spaceimpact

A side-scrolling space shooter built on pygame. You fly a ship through two
phases. You shoot down waves of enemies, pick up power-ups and fight the boss
that ends each phase.

## Installing

```
pip install .
```

## Playing

```
spaceimpact
spaceimpact --assets path/to/game-data --seed 42
```

Options:

* `--assets DIR` is the directory that holds the `imagens/`, `fonts/` and
  `musicas/` folders. The default is the current directory.
* `--seed N` seeds the random generator that places enemies.

Every image must be present. If one is missing, the command prints which one
and exits with status 1. A missing font file falls back to pygame's built-in
font. Missing music files are skipped without sound.

### Controls

In the title menu, the arrow keys move the selection and ENTER chooses
**Começar**, **Controles**, **Opções** or **Sair**. On the **Opções** screen,
keys act when released. The arrows move between the four groups: ship, shot
sprite, phase 1 background and phase 2 background. ENTER ticks the choice and
ESC goes back.

After the menu, three story slides are shown. Each stays up for 6 seconds, and
ENTER skips to the next.

| Key      | In the game                |
|----------|----------------------------|
| W A S D  | Move the ship              |
| ENTER    | Fire (hold to keep firing) |
| P        | Pause                      |

Moving left slows the background scroll and moving right speeds it up. On the
pause screen, ENTER resumes and ESC quits. On the defeat screen, ENTER
restarts and ESC quits. Closing the window quits at any time.

### How a phase goes

* Enemies arrive for 30 seconds. Basic enemies take two hits, and so do
  shooting enemies. Shooting enemies fire back at you, and in phase 2 they
  fire much faster.
* Destroying the fifth enemy in phase 1 (the fourth in phase 2) drops an item.
  In phase 1 the item makes your shots fly faster for 5 seconds. In phase 2 it
  makes them deal double damage for 5 seconds.
* Two seconds after the countdown ends, the boss arrives and the remaining
  enemies leave. The boss has 18 health. It fires regular shots and periodic
  special volleys. In phase 2 it moves faster, and shots that hit you during
  a volley slow your ship for a second.
* You have four lives. After each hit you are invulnerable for 1.5 seconds,
  and the ship blinks while this lasts.
* Beating the first boss shows a transition screen, where ENTER starts phase 2.
  Beating the second boss shows the victory screen.

## As a library

The game logic runs without a window. Time and randomness are passed in, so it
is easy to drive from tests:

```python
import random

from spaceimpact.rules import Key
from spaceimpact.session import GameSession, Outcome

session = GameSession(now=0.0, rng=random.Random(1))
session.press(Key.D)
outcome = session.update(now=0.02)
assert outcome is Outcome.RUNNING
```

`GameSession.update` returns an `Outcome`: `RUNNING`, `GAME_OVER`,
`PHASE_CLEARED` or `VICTORY`. Use `restart` and `start_second_phase` to act on
it.

Modules:

* `spaceimpact.entities`: constants, `Box`, `Joystick`, `GameOptions` and `Item`.
* `spaceimpact.player`: `Player`.
* `spaceimpact.bullets`: bullet types and their movement.
* `spaceimpact.enemies`: `Enemy`, `ShootingEnemy` and spawning helpers.
* `spaceimpact.boss`: `Boss` and `BossActivation`.
* `spaceimpact.collision`: hit checks and `Scoreboard`.
* `spaceimpact.rules`: key handling, background choice, restarts and `Spawner`.
* `spaceimpact.session`: `GameSession` and `Outcome`.
* `spaceimpact.render`, `spaceimpact.menus`, `spaceimpact.screens`,
  `spaceimpact.assets` and `spaceimpact.app`: drawing, menus, interludes,
  asset loading and the command itself.

## What it does not do

The package ships no images, fonts or music. You must supply them under the
asset directory. Scores are not saved between games, and there are no sound
effects beyond the looping menu and game music.

## Running the tests

```
pip install .[test]
pytest
```