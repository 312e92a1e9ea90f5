"""Ingredient domain entity: the free-text line of a recipe (e.g. "2 eggs")."""


class Ingredient:
    def __init__(self, text: str = ""):
        self.text = text

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.text == other.text

    def __str__(self) -> str:
        return self.text

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from {"text": ...}; a bare string is accepted too.'''
        if isinstance(data, str):
            return Ingredient(data)
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(str(d.get("text", "")))

    def to_dict(self):
        return {"text": self.text}
