"""
Constantes globales pour MediaLinker.

Ce module contient toutes les constantes utilisees dans l'application:
- Extensions video supportees
- Familles de mots-cles descripteurs (qualite, source, codecs, edition)
- Vocabulaire des etiquettes a retirer des titres
- Bornes de detection de l'annee
"""

# Extensions video reconnues
VIDEO_EXTENSIONS = frozenset({
    ".mkv",
    ".mp4",
    ".avi",
    ".mov",
    ".wmv",
    ".flv",
    ".m4v",
})

# Familles de descripteurs (fragments regex, insensibles a la casse)
QUALITY_KEYWORDS = (
    "2160p",
    "1080p",
    "720p",
    "480p",
    "HDR",
    "4K",
)

SOURCE_KEYWORDS = (
    r"WEB-DL",
    "WEBRip",
    "HDTV",
    "BluRay",
    "BDRemux",
    "Remux",
    "DVDRip",
    "AMZN",
    "DSNP",
)

VIDEO_CODEC_KEYWORDS = (
    "x264",
    "x265",
    r"H\.?264",
    r"H\.?265",
    "AVC",
    "HEVC",
    "VP9",
    "10bit",
)

AUDIO_CODEC_KEYWORDS = (
    "AAC",
    "AC3",
    "DTS-HD",
    "DTS",
    "TrueHD",
    "Atmos",
    "DDP",
    "FLAC",
)

EDITION_KEYWORDS = (
    "extended edition",
    "directors cut",
    "remastered",
    "uncut",
    "3D",
    "hsbs",
    "Half-SBS",
    "SBS",
)

# Etiquettes d'edition, de source et de groupes de release a retirer du titre
STRIP_LABELS = (
    "unrated edition",
    "extended edition",
    "directors cut",
    "remastered",
    "final cut",
    "imax edition",
    "ultimate edition",
    "collector s edition",
    "limited",
    "repack",
    "readnfo",
    "read note",
    "edition",
    "cut",
    "3d",
    "hsbs",
    "half sbs",
    "proper",
    "internal",
    "cam",
    "tc",
    "ts",
    "hdtv",
    "bluray",
    "webrip",
    "web-dl",
    "web dl",
    "dvdrip",
    "xvid",
    "x264",
    "x265",
    "hevc",
    "hdrip",
    "collective",
    "yify",
    "evo",
    "tgx",
    "fgt",
    "amzn",
    "dsnp",
    "nf",
    "ddp",
    "atmos",
    "10bit",
    "batch",
    "mrs",
)

# Annees plausibles pour une sortie (1950-2099)
YEAR_PATTERN = r"\b(?:19[5-9]\d|20\d{2})\b"

# Ecart maximum accepte pour une plage d'episodes (S01E01-E20)
MAX_EPISODE_SPAN = 20

# Annee canonique quand le fournisseur n'en donne pas
UNKNOWN_YEAR = "0000"

# Genre TMDB "Animation" et pays d'origine prefere pour les animes
TMDB_ANIMATION_GENRE_ID = 16
ANIME_ORIGIN_COUNTRY = "JP"
