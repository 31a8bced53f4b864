from dataclasses import dataclass


@dataclass
class HeaderLabel:
    """Displays the name of the user whose deck is shown."""
    text: str = ""
