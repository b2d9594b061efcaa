"""Display text helpers: joined names, character lists and story titles."""

from dreamweaver.models import StoryMode

DEFAULT_CHILD_NAME = "Your Child"


def join_child_names(names: list[str]) -> str:
    """'Mia', 'Mia and Leo', 'Mia, Leo, and Ava'. Blank names are skipped."""
    valid = [n.strip() for n in names if n and n.strip()]
    if not valid:
        return DEFAULT_CHILD_NAME
    if len(valid) == 1:
        return valid[0]
    if len(valid) == 2:
        return f"{valid[0]} and {valid[1]}"
    return f"{', '.join(valid[:-1])}, and {valid[-1]}"


def split_characters(characters: list[str] | str) -> list[str]:
    """Accept a list or a comma-separated string; drop blanks."""
    if isinstance(characters, str):
        characters = characters.split(",")
    return [c.strip() for c in characters if c and c.strip()]


def join_characters(characters: list[str] | str) -> str:
    """Join with 'and'; more than two becomes 'A and B and others'."""
    names = split_characters(characters)
    if len(names) > 2:
        return f"{' and '.join(names[:2])} and others"
    return " and ".join(names)


def story_title(mode: str, child_names_text: str, holiday: str | None = None) -> str:
    story_mode = StoryMode.parse(mode)
    if story_mode is StoryMode.PLAYFUL:
        return f"{child_names_text}'s Fun Adventure"
    if story_mode is StoryMode.BATH_TIME:
        return f"{child_names_text}'s Splashing Bath Time"
    if story_mode is StoryMode.BEDTIME:
        return f"{child_names_text}'s Peaceful Dream"
    if story_mode is StoryMode.HOLIDAY:
        if holiday and holiday.strip():
            return f"{child_names_text}'s {holiday.strip()} Adventure"
        return f"{child_names_text}'s Holiday Magic"
    return f"{child_names_text}'s Special Story"
