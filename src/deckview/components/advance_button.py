from dataclasses import dataclass


@dataclass
class AdvanceButton:
    """The "next user" affordance; disabled while a profile is loading."""
    label: str = "Next"
    enabled: bool = True
