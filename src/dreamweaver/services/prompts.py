"""Story prompts for the chat completion API."""

from dreamweaver.models import StoryMode

PLAYFUL_PROMPT = (
    "Create a fun, energetic story for {child_names} featuring {characters}. "
    "Make it playful, adventurous, and exciting with lots of action and laughs. "
    "Perfect for daytime reading with about 3-4 paragraphs. Include dialogue and vivid descriptions."
)

BATH_TIME_PROMPT = (
    "Create a gentle, water-themed story for {child_names} featuring {characters}. "
    "Include bubbles, splashing, and cleanliness themes. Make it soothing but fun. "
    "Perfect for bath time with about 3-4 paragraphs. Include sensory details about water and soap."
)

BEDTIME_PROMPT = (
    "Create a calm, peaceful bedtime story for {child_names} featuring {characters}. "
    "Include themes of friendship, dreams, and gentle adventures. "
    "Make it soothing and perfect for bedtime with about 3-4 paragraphs. End on a peaceful, sleepy note."
)

HOLIDAY_PROMPT = (
    "Create a festive holiday story for {child_names} featuring {characters}{holiday_theme}. "
    "Include holiday magic, traditions, and celebration themes. "
    "Make it joyful and festive with about 3-4 paragraphs. Include holiday-specific details and warmth."
)

GENERIC_PROMPT = (
    "Create an engaging story for {child_names} featuring {characters}. "
    "Make it age-appropriate, entertaining, and heartwarming with about 3-4 paragraphs."
)

CHIP_AND_MILO_NOTE = (
    "\n\nNote: If the story includes Chip and Milo, they are Minecraft YouTuber characters "
    "who are brothers and love building and exploring in Minecraft."
)

GUIDELINES = (
    "\n\nGuidelines: Use simple language appropriate for children ages 3-10. Include dialogue. "
    "Make it engaging and imaginative. Ensure the story has a clear beginning, middle, and happy ending."
)

MODE_PROMPTS = {
    StoryMode.PLAYFUL: PLAYFUL_PROMPT,
    StoryMode.BATH_TIME: BATH_TIME_PROMPT,
    StoryMode.BEDTIME: BEDTIME_PROMPT,
    StoryMode.HOLIDAY: HOLIDAY_PROMPT,
}


def build_story_prompt(
    mode: str,
    child_names: str,
    characters: str,
    holiday: str | None = None,
) -> str:
    """Build the user prompt. Unknown modes get the generic prompt."""
    story_mode = StoryMode.parse(mode)
    template = MODE_PROMPTS.get(story_mode, GENERIC_PROMPT) if story_mode else GENERIC_PROMPT
    holiday_theme = f" celebrating {holiday}" if holiday and holiday.strip() else ""
    base = template.format(
        child_names=child_names,
        characters=characters,
        holiday_theme=holiday_theme,
    )

    note = CHIP_AND_MILO_NOTE if "Chip" in characters and "Milo" in characters else ""
    return base + note + GUIDELINES
