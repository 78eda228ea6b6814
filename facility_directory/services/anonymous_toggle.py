"""Identity fields of the feedback form and the "anonymous" checkbox rule.

Switching to anonymous clears and disables first/last name. Switching
back only re-enables them; cleared values are not restored.
"""


class IdentityFields:
    def __init__(self, first_name: str = "", last_name: str = ""):
        self.first_name = first_name
        self.last_name = last_name
        self.enabled = True

    @property
    def anonymous(self) -> bool:
        return not self.enabled

    def set_anonymous(self, anonymous: bool) -> None:
        self.enabled = not anonymous
        if anonymous:
            self.first_name = ""
            self.last_name = ""

    def as_dict(self) -> dict:
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "enabled": self.enabled,
        }
