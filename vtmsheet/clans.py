"""Reference information about every playable clan."""

from __future__ import annotations

from dataclasses import dataclass

from vtmsheet.banes import bane_text

CLAN_IMAGE_DIRECTORY = "images/clans/"
DISCIPLINES_HEADER = "Disciplines:\n"


@dataclass(frozen=True)
class ClanInfo:
    """Everything the sheet shows about one clan."""

    name: str
    nicknames: str
    description: str
    bane: str
    compulsion: str
    disciplines: tuple[str, ...]

    @property
    def disciplines_text(self) -> str:
        """The discipline list as displayed, one per line."""
        body = "\n".join(self.disciplines)
        if len(self.disciplines) > 1:
            body += "\n"
        return DISCIPLINES_HEADER + body

    @property
    def image(self) -> str:
        """Path of the clan's picture."""
        return f"{CLAN_IMAGE_DIRECTORY}{self.name}.png"


# name: (nicknames, description, compulsion, disciplines)
_CLANS: dict[str, tuple[str, str, str, tuple[str, ...]]] = {
    "Banu Haqim": (
        "The Clan of the Hunt, Assamites, Assassins, Mediators, Lawmen, Saracens, Children of "
        "Haqim (endonym), Judges",
        "Silent masters of assassination, killing for hire and collecting blood for rituals to "
        "bring them closer to their progenitor.",
        "Judgement - Urged to punish a wrongdoer, the vampire must slake one Hunger from anyone "
        "that acts against their own Convictions. Failing to do so results in a three-dice "
        "penalty to all rolls until the Compulsion is satisfied or the scene ends. Should the "
        "victim be a vampire, the Bane applies.",
        ("Blood Sorcery", "Celerity", "Obfuscate"),
    ),
    "Brujah": (
        "The Learned Clan, Warrior Scholars, Punks, Rebels, Rabble, Zealots, Agitators",
        "Once philosopher-kings of an ancient civilization, but are now rebels and rogues with "
        "a fearsome inclination toward frenzy.",
        "Rebellion - The Brujah craves to take a stance against those who represent the status "
        "quo. This does not relent until they have gone against orders, expectations, or "
        "changed someone's mind. During this Compulsion, they suffer a -2 to dice all pools.",
        ("Potence", "Celerity", "Presence"),
    ),
    "Thin-Blood": (
        "Duskborn, Mercurians, The Young Ones, Run-Off, Weaklings, Chameleons",
        "Terms primarily used to refer to Caitiff and vampires of the 14th, or higher, "
        "generations. For centuries, the thin-blooded have been persecuted by elders, Gehenna "
        "cults, and other Noddists that fear their existence because Gehenna prophecies seem "
        "to indicate thin-blooded vampires are a sign of the End Times. ",
        "Duskborn do not suffer from any clan compulsion. Instead, select a number of "
        "Thinblood Merits and Flaws.",
        ("Thin-Blood Alchemy",),
    ),
    "Gangrel": (
        "The Clan of the Beast,Animals, B\u00eates, Outlanders, Outlaws, Wolf's-Heads",
        "Bestial and untamed, often coming to resemble the animals over which they demonstrate "
        "mastery.",
        "Feral Impulses - Unleash the animal hidden in their Blood. This urges the Gangrel to "
        "regress into an animalistic state where speech becomes difficult, clothes become too "
        "constrictive and arguments and best settled with claws and teeth. For one scene the "
        "Gangrel suffers a -3 dice penalty to all rolls involving Manipulation and "
        "Intelligence as they are only able to speak one word sentences during this "
        "Compulsion.",
        ("Animalism", "Fortitude", "Protean"),
    ),
    "Hecata": (
        "The Clan of Death, Necromancers, Graverobbers, The Family, Stiffs, Corpses, "
        "Devil-Kindred, Lazarenes",
        "An insular, extended family of vampires who practice the art of commanding the dead "
        "while commanding global finances.",
        "Morbidity - The vampire must move something from life to death or vice versa, any "
        "action not taken to end or resurrect something suffers a two-dice penalty. The "
        "subject does not have to be a living thing and can instead be an object or more "
        "abstract such as ideas or conversation points. This Compulsion lasts until their "
        "manage to kill or return something to life. ",
        ("Oblivion", "Auspex", "Fortitude"),
    ),
    "Lasombra": (
        "The Night Clan, Abyss Mystics, Keepers, Magisters, Shadows, Traitors, Turncoats",
        "Proud nobles who command the very essence of darkness and shadow \u2014 to the point "
        "of worshipping it, some say.",
        "Ruthlessness - The next time the vampire fails an action they receive a two-dice "
        "penalty to all rolls until a future attempt at the same action succeeds. This penalty "
        "applies to future attempts of the same action still.",
        ("Oblivion", "Dominate", "Potence"),
    ),
    "Malkavian": (
        "Kooks, Seers, Lunatics, Madmen, Cassandras, Children of Malkav, Clan of the Moon, "
        "Malks, Jesters",
        "A clan fractured by madness, each member irrevocably suffering under the yoke of "
        "insanity.",
        "Delusion - Whether it's figments of their imagination or extrasensory perception of "
        "the truths. For one scene, the Malkavian suffers a 2 dice penalty to rolls involving "
        "Dexterity, Manipulation, Composure, and Wits. As well as rolls to resist terror "
        "Frenzy.",
        ("Auspex", "Dominate", "Obfuscate"),
    ),
    "Ministry": (
        "Followers of Set, Judasians, Liberators, Corrupters, Tempters, Serpents, Setites, The "
        "Clan of Faith, the Clan of Lies, Typhonists, Sand-Snakes, Vipers",
        "Religious movement that evangelizes the example of a chthonic god, while seeking out "
        "the world\u2019s secret places and protecting ancient artifacts.",
        "Transgression - The Minister suffers a burning desire to influence those around them "
        "to shatter the chains of their own making. They suffer a two-dice penalty to all dice "
        "pools that do not relate to enticing someone or themselves to break a Chronicle or "
        "personal Conviction. The Compulsion ends once the Minister causes someone, or "
        "themselves, at least one stain.",
        ("Obfuscate", "Presence", "Protean"),
    ),
    "Nosferatu": (
        "The Clan of the Hidden, Sewer Rats, Lepers (archaic), Priors, Crawlers (Renaissance), "
        "Nossies",
        "Hideously disfigured by the Embrace, so they keep to the sewers shadows and traffic "
        "in the secrets they collect.",
        "Cryptophilia - Consumed by a hunger for private secrets, the Nosferatu seeks to "
        "obtain knowledge no matter big or small as long as it's not a well-known bit of "
        "information. During this, they also refuse to give up their secrets except in strict "
        "trade for something greater than their own. Any action not actively working towards "
        "gaining them a secret they take a two-dice penalty. This Compulsion does not end till "
        "they learn a secret they deem to be useful, sharing this secret is entirely optional.",
        ("Obfuscate", "Animalism", "Potence"),
    ),
    "Caitiff": (
        "The Clanless, The Wretched, Freestylers,  Orphans, Trash, Unbound (endonym), Parias",
        "Also known as the clanless, are rare Cainites that do not officially belong to any "
        "clan. These vampires have no inherent clan weakness, but no inherent disciplines as "
        "well. None of the typical clan markers apply to them. ",
        "Caitiffs do not suffer from any clan compulsion.",
        ("All and none",),
    ),
    "Ravnos": (
        "Rogues, Ravens, Daredevils, The Haunted, Gypsies, Criminals, Deceivers, Charlatans, "
        "Shapers, Seekers, Unwelcome, Hundred-Mask Clowns (by the Kuei-jin)",
        "Nomads and tricksters who can force the mind to see what isn\u2019t there, though "
        "they are slaves to the vices they indulge in.",
        "Tempting Fate - When faced with their next problem, the Daredevil must attempt the "
        "solution with the most dangerous or daring of actions, anything less incurs a "
        "two-dice penalty. Context appropriate flashy or risky attempts may even net bonus "
        "dice. They are free to convince others to follow them in their actions but may as "
        "well go it alone. This Compulsion persists until the problem is solved or further "
        "attempts become impossible to accomplish.",
        ("Obfuscate", "Presence", "Animalism"),
    ),
    "Salubri": (
        "Unicorns, Soulsuckers, Cyclops, Soul-Thieves, Daijals, Saulot's progeny, the Hidden "
        "Ones, Peacemakers",
        "In the Final Nights, the once mighty Salubri Clan is considered barely a bloodline "
        "after the diablerie of their progenitor, Saulot. Their general few numbers grant "
        "credibility to the rumors that they are only composed of seven vampires at any time, "
        "and that these modern Salubri are fully committed to the search for Golconda \u2013 "
        "enacting a bloody ritual when they achieve that state or despair of ever doing so. ",
        "Affective Empathy - Overwhelmed with empathy for a personal problem of someone else, "
        "any action not taken to help the person mitigate the suffering they take a two-dice "
        "penalty. This Compulsion continues until the sufferer's burden is eased, a more "
        "critical problem arises or the scene ends.",
        ("Auspex", "Dominate", "Fortitude"),
    ),
    "Toreador": (
        "The Clan of the Rose, Artisans (archaic), Aesthetes, Vanitas, Epicureans "
        "(Renaissance), Degenerates, Torries",
        "Cainites that enjoy every sensual pleasure the world has to offer, idolizing physical "
        "beauty and the adoration of their thralls.",
        "Obsession - Utterly obsessed with a single thing, the Toreador cannot speak of "
        "anything but that object. Be it a person, a piece of artwork, a blood splatter in the "
        "right lighting, or the sunrise itself, they cannot take their attention from it. Any "
        "other actions receive a two-dice penalty. This Compulsion lasts until they can no "
        "longer perceive the object or the scene ends.",
        ("Celerity", "Presence", "Auspex"),
    ),
    "Tremere": (
        "The Broken Clan, Warlocks, Wizards, Magi, Usurpers, Grayfaces, Tremores ('Trembling "
        "Ones'), the Pyramid",
        "Vampiric sorcerers that wield the supernatural power of their past as a hermetic "
        "house, though they became vampires through treachery and artifice.",
        "Perfectionism - Nothing but the best will satisfy them, anything less than "
        "exceptional still instills a profound sense of failure. When afflicted by this, the "
        "Warlock suffers a two-dice penalty to all dice pools. The penalty is reduced to one "
        "die when actions are being repeated and removed entirely on a second repeat. This "
        "does not end till they managed to score a critical win on a Skill roll or the scene "
        "ends.",
        ("Blood Sorcery", "Dominate", "Auspex"),
    ),
    "Tzimisce": (
        "Fiends, Dragons, Voivodes, The Old Clan, Stokers",
        "Eldritch Old World lords who have little in common with the mortal world and can "
        "manipulate flesh and bone at a whim.",
        "Covetousness - When afflicted with this compulsion they become obsessed with owning "
        "something in the scene, be it an object, or property to a living person. Whatever it "
        "is, they must add it to their collection and any action taken not towards this "
        "purpose incurs a two-dice penalty. This penalty continues until ownership is "
        "established or the object of their desire is unobtainable.",
        ("Dominate", "Animalism", "Protean"),
    ),
    "Ventrue": (
        "The Clan of Kings, Blue Bloods, Patricians, Warlords, Ambitiones, Power Mongers",
        "Observe the noblesse oblige of vampire society, though their entitlement and greed "
        "encourages them to seek ever more at the expense of others.",
        "Arrogance - Fueled by the beast and their natural desire for power, the Ventrue must "
        "force someone to obey a command given. The order cannot be given through "
        "supernatural means such as Dominate. Until they satisfy the requirements, they "
        "receive a two-dice penalty for any actions not directly related to leadership.",
        ("Dominate", "Presence", "Fortitude"),
    ),
}


def clan_names() -> list[str]:
    """Every known clan, in display order."""
    return list(_CLANS)


def clan_info(name: str, alternative_bane: bool) -> ClanInfo:
    """Details of clan ``name``; ``alternative_bane`` picks the alternative bane."""
    try:
        nicknames, description, compulsion, disciplines = _CLANS[name]
    except KeyError:
        raise KeyError(f"unknown clan: {name!r}") from None
    return ClanInfo(
        name=name,
        nicknames=nicknames,
        description=description,
        bane=bane_text(name, alternative_bane),
        compulsion=compulsion,
        disciplines=disciplines,
    )