from typing import List, Protocol


class HasBundle(Protocol):
    bundle: str


def suggest_templates(media_item: HasBundle, view_mode: str) -> List[str]:
    """
    Template keys for rendering ``media_item`` in ``view_mode``, ordered from
    most general to most specific. The renderer decides which one to use.

    A "video" item in view mode "teaser.compact" yields
    ``media__teaser_compact``, ``media__video``, ``media__video__teaser_compact``.
    """
    mode = view_mode.replace(".", "_")
    return [
        f"media__{mode}",
        f"media__{media_item.bundle}",
        f"media__{media_item.bundle}__{mode}",
    ]
