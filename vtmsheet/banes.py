"""Clan banes, in their standard and alternative forms."""

from __future__ import annotations

_BANES: dict[str, tuple[str, str]] = {
    "Banu Haqim": (
        "Blood Addiction - When the Banu Haqim slakes at least one Hunger level from another "
        "vampire, they must make a Hungry Frenzy test at difficulty 2 plus Bane Severity. If "
        "they fail, they must gorge themselves on vitae, in turn opening the door to possible "
        "Diablerie.",
        "Noxious Blood - The Blood of the Banu Haqim is toxic to mortals, but not to other "
        "vampires. Due to this mortals receive Aggravated Damage equal to the Bane Severity of "
        "the vampire for each Rouse Check\u2019s worth of Blood consumed. Their Blood cannot be "
        "used to heal mortal injuries. In amounts below the amount needed to Blood Bond, it "
        "does not harm them, even if directly injected into them.",
    ),
    "Brujah": (
        "Violent Temper - A rage is simmering in the back of the mind with a Brujah with the "
        "slightest provocation able to send them into a frenzied rage. Subtracts dice equal to "
        "the Bane Severity of the Brujah against Fury Frenzy",
        "Violence - When a messy critical occurs as the result of any Skill test, a Brujah "
        "vampire causes damage to the subject of their interaction equal to their Bane "
        "Severity, in addition to any other result of the Hunger dice. The type of damage is "
        "dependent on the situation either physical or mental. The damage is Aggravated unless "
        "the player spends a point of Willpower to turn it into Superficial.",
    ),
    "Thin-Blood": (
        "Duskborn do not suffer from any clan bane.",
        "Duskborn do not suffer from any clan bane.",
    ),
    "Gangrel": (
        "Bestial Features - In Frenzy, Gangrel gains animalistic features equal to their Bane "
        "Severity. These features last for one more night afterward, each feature reducing one "
        "Attribute by 1 point. The Gangrel may choose to Ride the Wave in order to only have one "
        "feature manifest and only lose one Attribute point.",
        "Survival Instincts - Subtract dice equal to the Bane Severity in any roll to resist "
        "fear Frenzy. The pool cannot be below one die.",
    ),
    "Hecata": (
        "Painful Kiss - Hecata may only take harmful drinks from mortals which result in blood "
        "loss. Unwilling mortals that are able to escape will make the attempt, even those who "
        "are convinced or willing must succeed in a Stamina + Resolve test against Difficulty "
        "2 + Bane Severity in order to not recoil. Vampires who are willingly bit must make a "
        "Frenzy test against Difficulty 3 to avoid terror Frenzy.",
        "Decay - Hecata suffer additional dots in Flaws equal to their Bane Severity spread as "
        "they see fit across Retainer, Haven, and Resources Flaws. These Flaws can either be "
        "taken at Character Creation or removed by paying twice the amount of Background dots. "
        "Additionally, any purchase of dots in these Advantages costs an additional amount of "
        "experience points equal to their Bane Severity.",
    ),
    "Lasombra": (
        "Distorted Image - In reflections or recordings (live or not) the Lasombra appear to be "
        "distorted, those who know what vampires are know precisely what's going on, while "
        "others might be confused but know something is wrong. This does not however, hide "
        "their identity with any certainty and they are not likely to be caught more often on "
        "surveillance than any other Kindred. In addition to this, modern communication "
        "technology which includes making a phone call requires a Technology test at Difficulty "
        "2 + Bane Severity as microphones struggle with them as much as cameras. Avoiding any "
        "electronic vampire detection system is also done with a penalty equal to their Bane "
        "Severity",
        "Callousness - Whenever making a Remorse test remove a number of dice equal to the Bane "
        "Severity. The dice pool cannot be reduced below 1. ",
    ),
    "Malkavian": (
        "Fractured Perspective - When suffering a Bestial Failure or a Compulsion, their mental "
        "derangement comes to the forefront. Suffers a penalty equal to their Bane Severity to "
        "one category of dice pools (Physical, Social or Mental) for the entire scene. The "
        "penalty and nature of the affliction are decided between the player and Storyteller "
        "during character creation.",
        "Unnatural Manifestations - Using Discipline powers within close proximity of mortals "
        "scares them and any social interactions other than Intimidation suffer a dice penalty "
        "equal to their Bane Severity. This is not Masquerade-breaking, but the dislike remains "
        "for the duration of one scene. Other vampires subject to this recognize the Malkavian "
        "as a vampire but suffer no penalty.",
    ),
    "Ministry": (
        "Abhors the Light - When a Minister is exposed to direct illumination, be it naturally "
        "caused or artificial, they receive a penalty equal to their Bane Severity to all dice "
        "pools while subject to the light. They also add their Bane Severity to Aggravated "
        "damage taken from sunlight.",
        "Cold-Blooded - They can only use Blush of Life if they have recently fed from a living "
        "vessel in the same scene or up to roughly an hour ago, Storytellers discretion. When "
        "they do so, it requires a number of Rouse Checks equal to their Bane Severity rather "
        "than just one.",
    ),
    "Nosferatu": (
        "Repulsiveness - Cursed by their blood, when they are Embraced they are twisted into "
        "revolting monsters. They can never raise their rating in the Looks merits and instead "
        "must take the (\u2022\u2022) Repulsive flaw. Any attempt to disguise themselves incurs a "
        "penalty equal to the character's Bane Severity, this also includes the use of "
        "Disciplines such as Mask of a Thousand Faces. However, most Nosferatu do not breach "
        "the Masquerade by being seen, they are instead perceived as gross or terrifying.",
        "Infestation - The Haven of a Nosferatu is always infested with vermin, any attempt to "
        "do something that requires concentration takes a two plus Bane Severity penalty, as "
        "well as the same penalty to social tests at ST discretion. Additionally, when a "
        "Nosferatu spends a scene at an enclosed location, the vermin appears and causes the "
        "same penalty though reduced to equal only the Bane Severity. Any attempt to control "
        "these vermin with Animalism is done at a penalty equal to Bane Severity",
    ),
    "Caitiff": (
        "Clanless.\n -- Learning disciplines requires more experience. (new Lvl x 6)\n"
        " -- At character creation: Suspect (1) Flaw & No Status Merit!\n"
        " -- Dice penalty on Social tests.",
        "Clanless.\n -- Learning disciplines requires more experience. (new Lvl x 6)\n"
        " -- At character creation: Suspect (1) Flaw & No Status Merit!\n"
        " -- Dice penalty on Social tests.",
    ),
    "Ravnos": (
        "Doomed - Anytime they daysleep within the same place more than once in seven nights, "
        "roll a number of dice equal to their Bane Severity. If they receive any 10's they then "
        "take 1 Aggravated damage for each as they are scorched from within. What constitutes "
        "as the same place is defined by the chronicle, but generally will need a mile distance "
        "between the two resting places before the bane is triggered. Mobile havens do work as "
        "long as the haven is moved a mile away. Due to this, the Ravnos may not take the No "
        "Haven Flaw.",
        "Unbirth Name - If a Ravnos\u2019 unbirth name is used against them, the name-wielding "
        "opponent receives a bonus equal to the Ravnos\u2019 Bane Severity to resist their "
        "Discipline powers. Additionally, the Ravnos affected receives the same penalty to "
        "resist supernatural powers used by the opponent.",
    ),
    "Salubri": (
        "Hunted - Their vitae has a unique trait where when another clan partakes in their "
        "Blood they find it difficult to pull away. Once a non-Salubri has consumed at least "
        "one Hunger level worth, they must make a Hunger Frenzy test at difficulty 2 + the "
        "Salubri's Bane Severity (3 + the Salubri's Bane Severity for Banu Haqim). If they "
        "fail, they will continue to consume the Salubri until pried off. Additionally, each "
        "Salubri has a third eye and while it's not always human-like it's always present and "
        "cannot be obscured by supernatural powers. In addition to this, whenever they activate "
        "a Discipline, the eye weeps vitae with its intensity correlating to the level of the "
        "Discipline used. The Blood flowing from the eye can trigger a Hunger Frenzy test from "
        "nearby vampires with Hunger 4 or more",
        "Asceticism - Whenever their Hunger is below three, the Salubri suffer a penalty equal "
        "to their Bane Severity to any Discipline dice pools. The bleeding third eye still "
        "remains.",
    ),
    "Toreador": (
        "Aesthetic Fixation - A desire for beauty takes control over the Toreador and when in "
        "lesser surroundings they suffer. When they are within settings they find less than "
        "beautiful, they take a penalty equal to their Bane Severity when using Disciplines.",
        "Agonizing Empathy - Whenever their feeding causes Aggravated damage to a mortal, the "
        "vampire suffers the same damage in return but cannot receive more than their Bane "
        "Severity. This damage is generally Aggravated. The damage itself is reflected as vivid "
        "bruising wherever they bit their victim as internal bleeding takes place.",
    ),
    "Tremere": (
        "Deficient Blood - Before the fall of Vienna, they were defined by their rigid hierarchy "
        "of Blood Bonds within the Pyramid. After the fall, their Blood weakened and rejected "
        "all prior connections. Tremere are unable to Blood Bond other Kindred, though they can "
        "still be Bound by other clans. Tremere can still Blood Bond mortals to do their "
        "bidding, but the vitae must drink an additional amount of times equal to their Bane "
        "Severity.",
        "Stolen Blood - When performing a Blood Surge they need to make Rouse Checks equal to "
        "their Bane Severity. If these Rouse Checks increase their Hunger to 5 or higher, they "
        "can choose whether to back off their Blood Surge or perform it to then hit Hunger 5 "
        "afterward immediately",
    ),
    "Tzimisce": (
        "Grounded - Each Tzimisce must select a specific charge, be it physical location, a "
        "group of people, or something even more esoteric. Each night they must sleep "
        "surrounded by their charge, if they do not, they sustain aggravated Willpower damage "
        "equal to their Bane Severity upon waking the following night.",
        "Cursed Courtesy - If they wish to enter a place of residence uninvited they must spend "
        "Willpower equal to their Bane Severity, this penalty also applies to their Discipline "
        "pools while they are there. The invitation inside can only be made by someone who "
        "lives there and this does not occur in uninhabited homes or public places. Tzimisce "
        "with this Bane cannot take the uninvited Folkloric Block.",
    ),
    "Ventrue": (
        "Rarefied Tastes - When the Ventrue drinks the blood of a mortal who does not fall "
        "within their preference, they must spend Willpower equal to their Bane Severity else "
        "they will vomit the blood from their bodies unable to slake their hunger. Their "
        "preferences range within the clan, some looking for descendants of a certain "
        "nationality to soldiers suffering from PTSD. With a Resolve + Awareness test, they can "
        "sense if a mortal they seek to feed from fits within their preference. At character "
        "creation, their preference should be selected.",
        "Hierarchy - The Ventrue suffer a penalty equal to their Bane Severity to their "
        "Discipline dice pools when using them against a vampire of a lower generation. They "
        "must also spend Willpower equal to this penalty if they wish to directly attack other "
        "vampires of a lower generation.",
    ),
}


def bane_text(clan: str, alternative: bool) -> str:
    """The bane of ``clan``; ``alternative`` picks the alternative bane."""
    try:
        standard, other = _BANES[clan]
    except KeyError:
        raise KeyError(f"unknown clan: {clan!r}") from None
    return other if alternative else standard