# vtmsheet

A library that models a character sheet for Vampire: The Masquerade
(5th edition). It keeps a character's attributes, skills, disciplines,
loresheets, merits and flaws, personal data and indicators (health,
willpower, hunger and humanity). Each part converts to and from the JSON
layout of the save files, and save files can be written, listed, read and
deleted in a directory.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Example

```python
from vtmsheet.attributes import Attributes
from vtmsheet.skills import Skills, PHYSICAL_SKILLS
from vtmsheet.indicators import Indicators
from vtmsheet.saves import SaveStore

attributes = Attributes()
attributes["Stamina"].click(2)          # three dots
physical = Skills(PHYSICAL_SKILLS)
physical["Brawl"].track.click(1)        # two dots

indicators = Indicators()
indicators.resize_health(attributes.health_base())        # Stamina + 3
indicators.resize_willpower(attributes.willpower_base())  # Composure + Resolve

store = SaveStore("saves")              # any directory; created when needed
file_name = store.save(
    {"Attributes": attributes.to_json(), "Physical Skills": physical.to_json()},
    "Nadia",
)                                       # 'Nadia.sav'
print(store.names())

data = store.load(file_name)
restored = Attributes()
restored.from_json(data["Attributes"])
```

The `from_json` methods apply ratings by clicking dots, so they are meant to
be called on a freshly made or cleared part.

## Modules

- `vtmsheet.dots`: `count_dots` and `DotTrack`, rating tracks that always fill
  from the left.
- `vtmsheet.attributes`: `Attributes`, with `health_base()` and
  `willpower_base()`.
- `vtmsheet.skills`: `Skill`, `Skills` and the lists `PHYSICAL_SKILLS`,
  `SOCIAL_SKILLS` and `MENTAL_SKILLS`.
- `vtmsheet.indicators`: `Damage`, `DamageTrack`, `Indicators` and
  `humanity_description(humanity)`.
- `vtmsheet.disciplines`: `Discipline` (one power slot per dot) and
  `Disciplines`.
- `vtmsheet.loresheets`: `Entry` and `EntryList`, named entries with a rating
  and a description.
- `vtmsheet.merits`: `MeritsAndFlaws`, two entry lists saved under `"Merits"`
  and `"Flaws"`.
- `vtmsheet.personal`: `PersonalData`, `blood_potency_stats(level)` and
  `clan_background(text)`.
- `vtmsheet.clans`: `clan_names()` and `clan_info(name, alternative_bane)`,
  which give nicknames, description, bane, compulsion and disciplines.
- `vtmsheet.banes`: `bane_text(clan, alternative)`.
- `vtmsheet.saves`: `SaveStore`, `save_file_name(name)` and
  `default_directory()`. The default is the user data directory from
  platformdirs.

## What it does not do

The package has no command-line program and no graphical interface. It does
not roll dice. There is also no single object for a whole character. To save
a whole character, build a dictionary of the parts' `to_json()` results
yourself, keyed as you like (for instance `"Attributes"`, `"Disciplines"`,
`"Indicators"`), and pass it to `SaveStore.save`. To restore one, hand each
part its section of `SaveStore.load`. The indicators do not follow attribute
changes by themselves: call `resize_health` and `resize_willpower` after a
change.