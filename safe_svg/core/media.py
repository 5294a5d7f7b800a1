"""
Accès médias — interface de la médiathèque hôte + implémentation fichiers locaux.
La médiathèque est un collaborateur externe : le renderer ne connaît que le Protocol.
"""
import logging
import mimetypes
from pathlib import Path
from typing import Dict, Optional, Protocol, Union, runtime_checkable

log = logging.getLogger(__name__)

SVG_MIME_TYPE = "image/svg+xml"
mimetypes.add_type(SVG_MIME_TYPE, ".svg")

MediaId = Union[int, str]


@runtime_checkable
class MediaLibrary(Protocol):
    def get_mime_type(self, media_id: MediaId) -> Optional[str]: ...
    def get_attached_file(self, media_id: MediaId) -> Optional[str]: ...
    def read_file(self, path: str) -> Optional[bytes]: ...


class LocalMediaLibrary:
    """
    Médiathèque sur un répertoire local.

    Usage:
        >>> media = LocalMediaLibrary("./media", {42: "logo.svg"})
        >>> media.get_mime_type(42)
        'image/svg+xml'
    """

    def __init__(self, root: Union[str, Path], index: Optional[Dict[MediaId, str]] = None):
        self.root = Path(root)
        self.index: Dict[MediaId, str] = dict(index or {})

    def add(self, media_id: MediaId, filename: str):
        """Enregistre un fichier (relatif à root) sous un identifiant."""
        self.index[media_id] = filename

    def get_attached_file(self, media_id: MediaId) -> Optional[str]:
        filename = self.index.get(media_id)
        if filename is None:
            return None
        return str(self.root / filename)

    def get_mime_type(self, media_id: MediaId) -> Optional[str]:
        path = self.get_attached_file(media_id)
        if path is None:
            return None
        mime, _ = mimetypes.guess_type(path)
        return mime

    def read_file(self, path: str) -> Optional[bytes]:
        try:
            return Path(path).read_bytes()
        except OSError as e:
            log.debug("Lecture impossible %s : %s", path, e)
            return None
