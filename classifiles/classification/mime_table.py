"""Built-in MIME type to extension table.

Secondary source for extension lookups, consulted when the shared-mime-info
database has no record for a type. Extensions are listed in order of
preference; an empty list marks a type that is known but has no canonical
extension.
"""

from typing import Dict, List, Optional

MIME_EXTENSIONS: Dict[str, List[str]] = {
    # Applications
    "application/epub+zip": ["epub"],
    "application/gzip": ["gz"],
    "application/java-archive": ["jar", "war", "ear"],
    "application/javascript": ["js", "mjs"],
    "application/json": ["json", "map"],
    "application/msword": ["doc", "dot"],
    "application/octet-stream": ["bin", "dms", "lrf", "mar", "so", "dist", "distz", "pkg", "bpk", "dump", "elc", "deploy", "exe", "dll", "deb", "dmg", "iso", "img", "msi", "msp", "msm", "buffer"],
    "application/ogg": ["ogx"],
    "application/pdf": ["pdf"],
    "application/pgp-signature": ["asc", "sig"],
    "application/postscript": ["ai", "eps", "ps"],
    "application/rtf": ["rtf"],
    "application/sql": ["sql"],
    "application/vnd.android.package-archive": ["apk"],
    "application/vnd.debian.binary-package": [],
    "application/vnd.ms-cab-compressed": ["cab"],
    "application/vnd.ms-excel": ["xls", "xlm", "xla", "xlc", "xlt", "xlw"],
    "application/vnd.ms-fontobject": ["eot"],
    "application/vnd.ms-powerpoint": ["ppt", "pps", "pot"],
    "application/vnd.oasis.opendocument.presentation": ["odp"],
    "application/vnd.oasis.opendocument.spreadsheet": ["ods"],
    "application/vnd.oasis.opendocument.text": ["odt"],
    "application/vnd.openxmlformats-officedocument.presentationml.presentation": ["pptx"],
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": ["xlsx"],
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": ["docx"],
    "application/vnd.rar": ["rar"],
    "application/vnd.sqlite3": [],
    "application/wasm": ["wasm"],
    "application/x-7z-compressed": ["7z"],
    "application/x-apple-diskimage": ["dmg"],
    "application/x-bzip": ["bz"],
    "application/x-bzip2": ["bz2", "boz"],
    "application/x-cpio": ["cpio"],
    "application/x-debian-package": ["deb", "udeb"],
    "application/x-executable": [],
    "application/x-iso9660-image": ["iso"],
    "application/x-lzip": [],
    "application/x-lzma": [],
    "application/x-msdownload": ["exe", "dll", "com", "bat", "msi"],
    "application/x-pie-executable": [],
    "application/x-rar-compressed": ["rar"],
    "application/x-redhat-package-manager": ["rpm"],
    "application/x-rpm": [],
    "application/x-sh": ["sh"],
    "application/x-shockwave-flash": ["swf"],
    "application/x-sqlite3": [],
    "application/x-tar": ["tar"],
    "application/x-tex": ["tex"],
    "application/x-x509-ca-cert": ["der", "crt", "pem"],
    "application/x-xz": ["xz"],
    "application/xhtml+xml": ["xhtml", "xht"],
    "application/xml": ["xml", "xsl", "xsd", "rng"],
    "application/zip": ["zip"],
    "application/zstd": ["zst"],
    "application/x-www-form-urlencoded": [],
    # Audio
    "audio/aac": [],
    "audio/amr": ["amr"],
    "audio/flac": [],
    "audio/midi": ["mid", "midi", "kar", "rmi"],
    "audio/mp4": ["m4a", "mp4a"],
    "audio/mpeg": ["mpga", "mp2", "mp2a", "mp3", "m2a", "m3a"],
    "audio/ogg": ["oga", "ogg", "spx", "opus"],
    "audio/wav": ["wav"],
    "audio/webm": ["weba"],
    "audio/x-aiff": ["aif", "aiff", "aifc"],
    "audio/x-flac": ["flac"],
    "audio/x-matroska": ["mka"],
    "audio/x-wav": ["wav"],
    # Fonts
    "font/otf": ["otf"],
    "font/ttf": ["ttf"],
    "font/woff": ["woff"],
    "font/woff2": ["woff2"],
    # Images
    "image/avif": ["avif"],
    "image/bmp": ["bmp"],
    "image/gif": ["gif"],
    "image/heic": ["heic"],
    "image/heif": ["heif"],
    "image/jpeg": ["jpeg", "jpg", "jpe"],
    "image/jxl": ["jxl"],
    "image/png": ["png"],
    "image/svg+xml": ["svg", "svgz"],
    "image/tiff": ["tif", "tiff"],
    "image/vnd.adobe.photoshop": ["psd"],
    "image/vnd.microsoft.icon": ["ico"],
    "image/webp": ["webp"],
    "image/x-canon-cr2": [],
    "image/x-icon": ["ico"],
    "image/x-xcf": [],
    # Text
    "text/calendar": ["ics", "ifb"],
    "text/css": ["css"],
    "text/csv": ["csv"],
    "text/html": ["html", "htm", "shtml"],
    "text/markdown": ["md", "markdown"],
    "text/plain": ["txt", "text", "conf", "def", "list", "log", "in", "ini"],
    "text/x-c": ["c", "cc", "cxx", "cpp", "h", "hh", "dic"],
    "text/x-python": [],
    "text/xml": ["xml"],
    "text/yaml": ["yaml", "yml"],
    # Video
    "video/3gpp": ["3gp", "3gpp"],
    "video/mp2t": ["ts"],
    "video/mp4": ["mp4", "mp4v", "mpg4"],
    "video/mpeg": ["mpeg", "mpg", "mpe", "m1v", "m2v"],
    "video/ogg": ["ogv"],
    "video/quicktime": ["qt", "mov"],
    "video/webm": ["webm"],
    "video/x-flv": ["flv"],
    "video/x-m4v": ["m4v"],
    "video/x-matroska": ["mkv", "mk3d", "mks"],
    "video/x-ms-wmv": ["wmv"],
    "video/x-msvideo": ["avi"],
}


def extensions(mime: str) -> Optional[List[str]]:
    """
    Return the known extensions for a MIME type.

    Args:
        mime: MIME type string, e.g. ``image/png``.

    Returns:
        List of extensions (possibly empty), or None if the type is not
        in the table.
    """
    return MIME_EXTENSIONS.get(mime)
