"""
Objets valeur pour les informations extraites d'un titre de release.

Un titre de release (ex: "The.Matrix.1999.1080p.BluRay.x264-GROUP") est
analyse une seule fois en un ParsedRelease immutable. Les enums portent
les valeurs canoniques utilisees partout dans le scoring.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Resolution(Enum):
    """Resolution video detectee dans le titre."""

    UHD_2160P = "2160p"
    FHD_1080P = "1080p"
    HD_720P = "720p"
    SD_480P = "480p"
    UNKNOWN = "unknown"


class Source(Enum):
    """Origine de la release (disque, streaming, diffusion, capture)."""

    REMUX = "remux"
    BLURAY = "bluray"
    WEBDL = "webdl"
    WEBRIP = "webrip"
    HDTV = "hdtv"
    DVD = "dvd"
    SCREENER = "screener"
    TELECINE = "telecine"
    TELESYNC = "telesync"
    CAM = "cam"
    UNKNOWN = "unknown"


class Codec(Enum):
    """Codec video."""

    AV1 = "av1"
    VVC = "vvc"
    H265 = "h265"
    H264 = "h264"
    VP9 = "vp9"
    VC1 = "vc1"
    MPEG2 = "mpeg2"
    XVID = "xvid"
    DIVX = "divx"
    UNKNOWN = "unknown"


class AudioCodec(Enum):
    """Codec audio de base (Atmos est un modificateur, pas un codec)."""

    TRUEHD = "truehd"
    DTS_X = "dts-x"
    DTS_HDMA = "dts-hdma"
    PCM = "pcm"
    FLAC = "flac"
    DTS_HD_HRA = "dts-hd-hra"
    DTS_HD = "dts-hd"
    DTS_ES = "dts-es"
    DTS = "dts"
    DD_PLUS = "dd+"
    OPUS = "opus"
    DD = "dd"
    AAC = "aac"
    MP3 = "mp3"
    UNKNOWN = "unknown"


class AudioChannels(Enum):
    """Configuration des canaux audio."""

    SURROUND_7_1 = "7.1"
    SURROUND_5_1 = "5.1"
    STEREO = "2.0"
    MONO = "1.0"
    UNKNOWN = "unknown"


class HdrFormat(Enum):
    """Format HDR, y compris les combinaisons Dolby Vision + couche de repli."""

    DOLBY_VISION_HDR10_PLUS = "dolby-vision-hdr10+"
    DOLBY_VISION_HDR10 = "dolby-vision-hdr10"
    DOLBY_VISION = "dolby-vision"
    DOLBY_VISION_HLG = "dolby-vision-hlg"
    DOLBY_VISION_SDR = "dolby-vision-sdr"
    HDR10_PLUS = "hdr10+"
    HDR10 = "hdr10"
    HDR = "hdr"
    HLG = "hlg"
    PQ = "pq"
    SDR = "sdr"


@dataclass(frozen=True)
class EpisodeInfo:
    """
    Structure episodique detectee dans un titre de serie.

    Attributs:
        season: Saison principale (premiere saison pour un pack multi-saisons)
        seasons: Toutes les saisons couvertes par un pack
        episodes: Numeros d'episodes (vide pour un pack)
        absolute_episode: Numerotation absolue (anime)
        is_season_pack: Release contenant une saison entiere (ou plusieurs)
        is_complete_series: Pack couvrant la serie depuis la saison 1
        is_daily: Emission quotidienne identifiee par sa date
        air_date: Date de diffusion au format YYYY-MM-DD
    """

    season: Optional[int] = None
    seasons: tuple[int, ...] = ()
    episodes: tuple[int, ...] = ()
    absolute_episode: Optional[int] = None
    is_season_pack: bool = False
    is_complete_series: bool = False
    is_daily: bool = False
    air_date: Optional[str] = None

    @property
    def season_count(self) -> int:
        """Nombre de saisons couvertes (0 si aucune saison connue)."""
        if self.seasons:
            return len(self.seasons)
        return 1 if self.season is not None else 0


@dataclass(frozen=True)
class ParsedRelease:
    """
    Informations extraites d'un titre de release.

    Objet valeur immutable cree une fois par titre. Les champs non
    resolus prennent la valeur UNKNOWN (ou None) et la confiance baisse
    en consequence.

    Attributs:
        original_title: Titre brut tel que recu
        clean_title: Titre affichable (casse titre, separateurs retires)
        year: Annee de sortie (1900..annee courante + 2)
        resolution, source, codec: Qualite video
        hdr: Format HDR ou None
        audio_codec, audio_channels, has_atmos: Qualite audio
        episode: Structure episodique (None pour un film)
        languages: Codes ISO 639-1 (["en"] par defaut)
        release_group: Groupe de release
        edition: Edition speciale (Director's Cut, IMAX...)
        dv_without_fallback: Dolby Vision sans couche HDR/HLG/SDR de repli
        confidence: Confiance globale du parsing (0.0 a 1.0)
    """

    original_title: str
    clean_title: str
    year: Optional[int] = None
    resolution: Resolution = Resolution.UNKNOWN
    source: Source = Source.UNKNOWN
    codec: Codec = Codec.UNKNOWN
    hdr: Optional[HdrFormat] = None
    audio_codec: AudioCodec = AudioCodec.UNKNOWN
    audio_channels: AudioChannels = AudioChannels.UNKNOWN
    has_atmos: bool = False
    episode: Optional[EpisodeInfo] = None
    languages: tuple[str, ...] = ("en",)
    release_group: Optional[str] = None
    edition: Optional[str] = None
    is_proper: bool = False
    is_repack: bool = False
    is_remux: bool = False
    is_3d: bool = False
    has_hardcoded_subs: bool = False
    dv_without_fallback: bool = False
    confidence: float = 0.0

    @property
    def is_tv(self) -> bool:
        """Indique si la release est un episode ou un pack de serie."""
        return self.episode is not None
