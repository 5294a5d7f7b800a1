"""
Design system de l'hôte — références aux presets (couleurs, espacements).

Format stocké par l'éditeur : "var:preset|spacing|50"
Format CSS produit          : "var(--wp--preset--spacing--50)"
Toute valeur qui ne respecte pas le format est retournée telle quelle.
"""

VAR_PREFIX = "var:"
PRESET_PREFIX = "--wp--preset"


def preset_variable(*slots: str) -> str:
    """("color", "primary") → var(--wp--preset--color--primary)"""
    return f"var({PRESET_PREFIX}--{'--'.join(slots)})"


def convert_to_css_variable(value: str) -> str:
    """
    Convertit une référence "var:a|b|c" en custom property CSS.
    "var:preset|spacing|50" → var(--wp--preset--spacing--50)
    "var:spacing|50|40"     → var(--wp--preset--spacing--50--40)
    "var:bad", "10px"       → inchangés
    """
    if not isinstance(value, str) or not value.startswith(VAR_PREFIX):
        return value

    parts = value[len(VAR_PREFIX):].split("|")
    if len(parts) != 3:
        return value

    # "preset" est déjà porté par le préfixe --wp--preset
    if parts[0] == "preset":
        parts = parts[1:]
    return preset_variable(*parts)


def preset_color(slot: str) -> str:
    """Slot couleur nommé (backgroundColor / textColor) → custom property."""
    return preset_variable("color", slot)
