"""Template stories - used when AI is unavailable. Deterministic, no I/O."""

from typing import Callable

from dreamweaver.models import StoryMode

DEFAULT_HOLIDAY = "holiday"

PLAYFUL_STORY = (
    "Once upon a time, {child_names} was playing outside when suddenly {characters} appeared! "
    "\"Want to go on an adventure?\" asked {characters} with a big smile.\n\n"
    "\"Yes!\" shouted {child_names} excitedly. Together, they discovered a hidden playground "
    "with slides that sparkled like rainbows and swings that could fly through the clouds. "
    "They played games, told jokes, and had races around the magical equipment.\n\n"
    "As the golden sun began to set, painting the sky in beautiful colors, {characters} said, "
    "\"This was the best day ever!\" {child_names} agreed, feeling happy and tired from all the fun. "
    "They promised to meet again tomorrow for another exciting adventure.\n\n"
    "{child_names} went home with a big smile, already dreaming about what amazing things "
    "they would discover next time with their wonderful friend {characters}!"
)

BATH_TIME_STORY = (
    "It was bath time, and {child_names} was getting ready for a warm, bubbly bath. "
    "Suddenly, {characters} appeared with a magical bottle of rainbow soap!\n\n"
    "\"This soap creates the most amazing bubbles,\" explained {characters}, pouring some into the water. "
    "Instantly, the bathroom filled with bubbles of every color - purple ones that smelled like lavender, "
    "blue ones that sparkled like stars, and yellow ones that felt as soft as silk.\n\n"
    "{child_names} and {characters} played bubble games, making bubble castles and watching them "
    "float gently around the room. The magical soap made {child_names} feel clean and refreshed, "
    "and the warm water was perfectly cozy.\n\n"
    "After the bath, wrapped in a fluffy towel, {child_names} felt squeaky clean and ready for "
    "sweet dreams. \"Thank you for making bath time so special!\" said {child_names}, giving "
    "{characters} a big, clean hug."
)

BEDTIME_STORY = (
    "As the first stars began to twinkle in the night sky, {child_names} was getting ready for bed. "
    "{characters} came to visit with a very special gift - a magical dream pillow made of moonbeams and starlight.\n\n"
    "\"This pillow will bring you the most wonderful dreams,\" whispered {characters} softly. "
    "\"Dreams filled with friendship, gentle adventures, and beautiful places.\" They tucked the pillow "
    "under {child_names}' head, and immediately it felt as soft as a cloud.\n\n"
    "{characters} sat beside the bed, telling quiet stories about peaceful meadows where friendly "
    "animals danced under the moonlight, and magical gardens where flowers sang lullabies. "
    "The gentle words made {child_names} feel safe, loved, and wonderfully sleepy.\n\n"
    "Soon, {child_names} drifted off to the most peaceful sleep, with {characters} watching over "
    "their dreams like a guardian angel. All through the night, the magical pillow brought "
    "beautiful dreams of joy, adventure, and friendship."
)

HOLIDAY_STORY = (
    "It was a very special {holiday}, and {child_names} was bubbling with excitement! "
    "{characters} arrived with arms full of festive decorations and holiday magic.\n\n"
    "\"Let's make this the most wonderful {holiday} ever!\" exclaimed {characters}. Together, "
    "they decorated with sparkling lights, colorful ornaments, and magical holiday symbols. "
    "The air filled with the sweet scents of holiday treats and the warm glow of celebration.\n\n"
    "They prepared special {holiday} activities, singing festive songs and sharing stories "
    "about the meaning of this special day. {characters} showed {child_names} how holiday magic "
    "comes from sharing joy, kindness, and love with others.\n\n"
    "As the {holiday} celebration came to an end, {child_names} felt their heart full of warmth "
    "and happiness. \"This was the most magical {holiday} ever!\" they said, hugging {characters} tightly. "
    "The holiday spirit would stay in their heart all year long, reminding them of this "
    "perfect day filled with love, friendship, and wonder."
)


def playful_story(child_names: str, characters: str, holiday: str) -> str:
    return PLAYFUL_STORY.format(child_names=child_names, characters=characters)


def bath_time_story(child_names: str, characters: str, holiday: str) -> str:
    return BATH_TIME_STORY.format(child_names=child_names, characters=characters)


def bedtime_story(child_names: str, characters: str, holiday: str) -> str:
    return BEDTIME_STORY.format(child_names=child_names, characters=characters)


def holiday_story(child_names: str, characters: str, holiday: str) -> str:
    return HOLIDAY_STORY.format(child_names=child_names, characters=characters, holiday=holiday)


TEMPLATES: dict[StoryMode, Callable[[str, str, str], str]] = {
    StoryMode.PLAYFUL: playful_story,
    StoryMode.BATH_TIME: bath_time_story,
    StoryMode.BEDTIME: bedtime_story,
    StoryMode.HOLIDAY: holiday_story,
}


def generate_template_story(
    mode: str,
    child_names: str,
    characters: str,
    holiday: str | None = None,
) -> str:
    """Fill the template for `mode`. Unknown modes get the playful story."""
    story_mode = StoryMode.parse(mode) or StoryMode.PLAYFUL
    holiday_name = holiday if holiday and holiday.strip() else DEFAULT_HOLIDAY
    return TEMPLATES[story_mode](child_names, characters, holiday_name)
