"""
Profils de scoring integres.

Quatre philosophies de qualite:
- best: qualite maximale (remux, audio sans perte, meilleurs groupes)
- efficient: haute qualite en encodage efficace (x265, groupes dedies)
- micro: petits fichiers de qualite (groupes micro, x265, audio lossy)
- streaming: releases de streaming instantane, toujours remplacables

Les bornes de taille ne sont pas fixees par les profils integres:
elles relevent de la configuration de l'utilisateur.
Tous les profils donnent le score de bannissement aux formats bannis.
"""

from dataclasses import replace
from typing import Iterable, Optional, Union

from loguru import logger

from cinerank.core.ports.profile_store import ProfileNotFoundError
from cinerank.core.value_objects.custom_format import CustomFormat, FormatCategory
from cinerank.core.value_objects.scoring import BANNED_SCORE, Protocol, ScoringProfile
from cinerank.services.formats import ALL_FORMATS, get_formats_by_category


def _with_bans(format_scores: dict[str, int]) -> dict[str, int]:
    """Complete les scores d'un profil avec le bannissement des formats bannis."""
    banned = {fmt.id: BANNED_SCORE for fmt in get_formats_by_category(FormatCategory.BANNED)}
    return {**format_scores, **banned}


# ====================
# Best
# ====================

BEST_PROFILE = ScoringProfile(
    id="best",
    name="Best",
    description="Qualite absolue: remux, audio sans perte, aucun compromis",
    tags=("quality", "remux", "lossless", "no-compromise"),
    category="quality",
    min_score=0,
    upgrade_until_score=100000,
    min_score_increment=500,
    format_scores=_with_bans({
        # Resolution + source
        "2160p-remux": 20000,
        "2160p-bluray": 15000,
        "2160p-webdl": 8000,
        "2160p-webrip": 5000,
        "1080p-remux": 12000,
        "1080p-bluray": 8000,
        "1080p-webdl": 4000,
        "1080p-webdl-hevc": 4500,
        "1080p-webrip": 2000,
        "1080p-hdtv": 1000,
        "720p-bluray": 3000,
        "720p-webdl": 1500,
        "720p-webrip": 800,
        "720p-hdtv": 500,
        "480p-webdl": 100,
        "dvd": 50,
        "dvd-remux": 150,
        # Tiers de groupes
        "2160p-quality-tier-1": 2000,
        "2160p-quality-tier-2": 1500,
        "2160p-quality-tier-3": 1000,
        "1080p-quality-tier-1": 1800,
        "1080p-quality-tier-2": 1400,
        "1080p-quality-tier-3": 1000,
        "1080p-quality-tier-4": 700,
        "1080p-quality-tier-5": 400,
        "1080p-quality-tier-6": 200,
        "1080p-efficient-tier-1": 1200,
        "1080p-efficient-tier-2": 900,
        "1080p-efficient-tier-3": 600,
        "1080p-efficient-tier-4": 400,
        "1080p-efficient-tier-5": 200,
        "remux-tier-1": 2500,
        "remux-tier-2": 2000,
        "remux-tier-3": 1500,
        "webdl-tier-1": 1000,
        "webdl-tier-2": 700,
        "webdl-tier-3": 400,
        "720p-quality-tier-1": 800,
        "720p-quality-tier-2": 500,
        # Audio
        "audio-truehd": 2500,
        "audio-dts-x": 2800,
        "audio-dts-hdma": 2400,
        "audio-pcm": 2000,
        "audio-flac": 1800,
        "audio-atmos": 1500,
        "audio-atmos-missing": 1500,
        "audio-dts-hd-hra": 1000,
        "audio-ddplus": 800,
        "audio-dts-es": 600,
        "audio-dts": 500,
        "audio-dd": 400,
        "audio-opus": 100,
        "audio-aac": 100,
        "audio-mp3": 50,
        # HDR
        "hdr-dolby-vision": 2500,
        "hdr-dolby-vision-no-fallback": 1000,
        "hdr-hdr10plus": 1600,
        "hdr-hdr10": 1200,
        "hdr10-missing": 1200,
        "hdr-generic": 1000,
        "hdr-missing": 1000,
        "hdr-hlg": 800,
        "hdr-pq": 500,
        "hdr-sdr": 0,
        # Streaming
        "streaming-atvp": 700,
        "streaming-amzn": 500,
        "streaming-nf": 500,
        "streaming-dsnp": 500,
        "streaming-hmax": 500,
        "streaming-max": 500,
        "streaming-pcok": 400,
        "streaming-pmtp": 400,
        "streaming-it": 400,
        "streaming-hulu": 300,
        "streaming-stan": 300,
        "streaming-crav": 300,
        "streaming-sho": 300,
        "streaming-now": 200,
        "streaming-roku": 200,
        "streaming-bcore": 700,
        "streaming-ma": 300,
        # Groupes micro: penalises
        "micro-yts": -5000,
        "micro-yify": -5000,
        "micro-rarbg": -2000,
        "micro-psa": -3000,
        "micro-megusta": -3000,
        "micro-galaxyrg": -2500,
        "micro-tgx": -3000,
        "micro-etrg": -3000,
        "micro-ettv": -3000,
        "micro-eztv": -3000,
        "micro-x0r": -3000,
        "micro-fgt": -3000,
        "micro-ion10": -3000,
        # Ameliorations
        "proper": 500,
        "edition-remastered": 300,
        "edition-unrated": 100,
        "edition-extended": 200,
        "edition-imax": 400,
        "edition-theatrical": 100,
        "edition-directors-cut": 150,
        "codec-x265": 200,
        "codec-x264": 100,
        "codec-av1": 300,
        # Groupes de faible qualite
        "lq-nahom": -5000,
        "lq-oeplus": -5000,
        "lq-4k4u": -5000,
        "lq-aoc": -5000,
        "lq-beyondhd-encode": -4000,
        "lq-hds": -5000,
        "lq-d3g": -5000,
        "lq-flights": -5000,
        "lq-classicalhd": -4000,
        "lq-creative24": -4000,
        "lq-depraved": -4000,
        "lq-devisive": -4000,
        "lq-drx": -4000,
        "lq-blasphemy": -4000,
        "lq-bols": -4000,
        "lq-btm": -4000,
        "lq-fgt": -4000,
        "lq-ivy": -4000,
        "lq-kc": -4000,
    }),
)


# ====================
# Efficient
# ====================

EFFICIENT_PROFILE = ScoringProfile(
    id="efficient",
    name="Efficient",
    description="Haute qualite en encodage efficace: x265, groupes de qualite",
    tags=("quality", "x265", "efficient"),
    category="efficient",
    min_score=0,
    upgrade_until_score=25000,
    min_score_increment=50,
    format_scores=_with_bans({
        # Les encodes passent avant les remux (taille)
        "2160p-remux": 10000,
        "2160p-bluray": 15000,
        "2160p-webdl": 12000,
        "2160p-webrip": 8000,
        "1080p-remux": 5000,
        "1080p-bluray": 8000,
        "1080p-webdl": 6000,
        "1080p-webdl-hevc": 9000,
        "1080p-webrip": 4000,
        "1080p-hdtv": 2000,
        "720p-bluray": 3000,
        "720p-webdl": 2500,
        "720p-webrip": 1500,
        "720p-hdtv": 1000,
        "480p-webdl": 200,
        "dvd": 100,
        "dvd-remux": 50,
        "2160p-quality-tier-1": 1500,
        "2160p-quality-tier-2": 1200,
        "2160p-quality-tier-3": 800,
        "1080p-quality-tier-1": 1000,
        "1080p-quality-tier-2": 800,
        "1080p-quality-tier-3": 600,
        "1080p-quality-tier-4": 400,
        "1080p-quality-tier-5": 200,
        "1080p-quality-tier-6": 100,
        "1080p-efficient-tier-1": 2000,
        "1080p-efficient-tier-2": 1700,
        "1080p-efficient-tier-3": 1400,
        "1080p-efficient-tier-4": 1000,
        "1080p-efficient-tier-5": 600,
        "remux-tier-1": 800,
        "remux-tier-2": 600,
        "remux-tier-3": 400,
        "webdl-tier-1": 1200,
        "webdl-tier-2": 900,
        "webdl-tier-3": 600,
        "720p-quality-tier-1": 600,
        "720p-quality-tier-2": 400,
        "audio-truehd": 1500,
        "audio-dts-x": 1800,
        "audio-dts-hdma": 1400,
        "audio-flac": 1200,
        "audio-pcm": 1000,
        "audio-atmos": 1800,
        "audio-atmos-missing": 1800,
        "audio-ddplus": 1200,
        "audio-dts-hd-hra": 1000,
        "audio-dd": 500,
        "audio-dts-es": 500,
        "audio-opus": 500,
        "audio-dts": 400,
        "audio-aac": 300,
        "audio-mp3": 100,
        "hdr-dolby-vision": 2000,
        "hdr-dolby-vision-no-fallback": 800,
        "hdr-hdr10plus": 1400,
        "hdr-hdr10": 1000,
        "hdr10-missing": 1000,
        "hdr-generic": 800,
        "hdr-missing": 800,
        "hdr-hlg": 600,
        "hdr-pq": 400,
        "hdr-sdr": 0,
        "streaming-atvp": 800,
        "streaming-amzn": 600,
        "streaming-nf": 600,
        "streaming-dsnp": 500,
        "streaming-hmax": 500,
        "streaming-max": 500,
        "streaming-pcok": 400,
        "streaming-pmtp": 400,
        "streaming-it": 400,
        "streaming-hulu": 300,
        "streaming-stan": 300,
        "streaming-crav": 300,
        "streaming-sho": 300,
        "streaming-now": 200,
        "streaming-roku": 200,
        "streaming-bcore": 800,
        "streaming-ma": 300,
        "micro-rarbg": 500,
        "micro-yts": -2000,
        "micro-yify": -2000,
        "micro-psa": -500,
        "micro-megusta": -500,
        "micro-galaxyrg": 0,
        "micro-tgx": -500,
        "micro-etrg": -500,
        "micro-ettv": -1000,
        "micro-eztv": -1000,
        "micro-x0r": -500,
        "micro-fgt": -1000,
        "micro-ion10": -1000,
        "proper": 600,
        "edition-remastered": 400,
        "edition-unrated": 150,
        "edition-extended": 250,
        "edition-imax": 500,
        "edition-theatrical": 150,
        "edition-directors-cut": 250,
        # Le x265 est la cle de ce profil
        "codec-x265": 2500,
        "codec-x264": 0,
        "codec-av1": 3000,
        "lq-nahom": -3000,
        "lq-oeplus": -3000,
        "lq-4k4u": -3000,
        "lq-aoc": -3000,
        "lq-beyondhd-encode": -2000,
        "lq-hds": -3000,
        "lq-d3g": -3000,
        "lq-flights": -3000,
        "lq-classicalhd": -2500,
        "lq-creative24": -2500,
        "lq-depraved": -2500,
        "lq-devisive": -2500,
        "lq-drx": -2500,
        "lq-blasphemy": -2500,
        "lq-bols": -2500,
        "lq-btm": -2500,
        "lq-fgt": -2500,
        "lq-ivy": -2500,
        "lq-kc": -2500,
    }),
)


# ====================
# Micro
# ====================

MICRO_PROFILE = ScoringProfile(
    id="micro",
    name="Micro",
    description="Micro-encodes de qualite: groupes micro, x265 efficace",
    tags=("micro", "efficient", "small"),
    category="micro",
    min_score=-5000,
    upgrade_until_score=10000,
    min_score_increment=10,
    format_scores=_with_bans({
        # La hierarchie des resolutions est conservee (1080p > 720p > SD)
        "2160p-remux": -5000,
        "2160p-bluray": -2000,
        "2160p-webdl": 3000,
        "2160p-webrip": 3500,
        "1080p-webdl-hevc": 8000,
        "1080p-webrip": 7000,
        "1080p-webdl": 6500,
        "1080p-bluray": 5500,
        "1080p-hdtv": 5000,
        "1080p-remux": -3000,
        "720p-webdl": 4500,
        "720p-webrip": 4000,
        "720p-bluray": 3500,
        "720p-hdtv": 3000,
        "480p-webdl": 2500,
        "dvd": 2000,
        "dvd-remux": 1500,
        "2160p-quality-tier-1": -500,
        "2160p-quality-tier-2": -300,
        "2160p-quality-tier-3": -100,
        "1080p-quality-tier-1": 400,
        "1080p-quality-tier-2": 350,
        "1080p-quality-tier-3": 300,
        "1080p-quality-tier-4": 250,
        "1080p-quality-tier-5": 200,
        "1080p-quality-tier-6": 150,
        "1080p-efficient-tier-1": 2500,
        "1080p-efficient-tier-2": 2200,
        "1080p-efficient-tier-3": 1800,
        "1080p-efficient-tier-4": 1400,
        "1080p-efficient-tier-5": 1000,
        "remux-tier-1": -2000,
        "remux-tier-2": -1500,
        "remux-tier-3": -1000,
        "webdl-tier-1": 1200,
        "webdl-tier-2": 900,
        "webdl-tier-3": 600,
        "720p-quality-tier-1": 800,
        "720p-quality-tier-2": 600,
        # Audio sans perte: trop volumineux
        "audio-truehd": -800,
        "audio-dts-x": -900,
        "audio-dts-hdma": -700,
        "audio-flac": -500,
        "audio-pcm": -600,
        "audio-atmos": 500,
        "audio-atmos-missing": 0,
        "audio-dts-hd-hra": 200,
        "audio-dts-es": 100,
        "audio-ddplus": 1000,
        "audio-dts": 200,
        "audio-dd": 600,
        "audio-opus": 1500,
        "audio-aac": 1500,
        "audio-mp3": 1000,
        "hdr-dolby-vision": 600,
        "hdr-dolby-vision-no-fallback": 200,
        "hdr-hdr10plus": 450,
        "hdr-hdr10": 350,
        "hdr10-missing": 350,
        "hdr-generic": 300,
        "hdr-missing": 300,
        "hdr-hlg": 200,
        "hdr-pq": 100,
        "hdr-sdr": 0,
        "streaming-atvp": 400,
        "streaming-amzn": 300,
        "streaming-nf": 300,
        "streaming-dsnp": 300,
        "streaming-hmax": 300,
        "streaming-max": 300,
        "streaming-pcok": 200,
        "streaming-pmtp": 200,
        "streaming-it": 200,
        "streaming-hulu": 150,
        "streaming-stan": 150,
        "streaming-crav": 150,
        "streaming-sho": 150,
        "streaming-now": 100,
        "streaming-roku": 100,
        "streaming-bcore": 300,
        "streaming-ma": 150,
        # Les groupes micro sont le coeur de ce profil
        "micro-rarbg": 4000,
        "micro-psa": 3000,
        "micro-galaxyrg": 3000,
        "micro-megusta": 2500,
        "micro-tgx": 2500,
        "micro-etrg": 2000,
        "micro-ettv": 1500,
        "micro-eztv": 1500,
        "micro-x0r": 2000,
        "micro-fgt": 1500,
        "micro-ion10": 1500,
        "micro-yts": 2000,
        "micro-yify": 1500,
        "proper": 200,
        "edition-remastered": 100,
        "edition-unrated": 25,
        "edition-extended": 50,
        "edition-imax": 100,
        "edition-theatrical": 25,
        "edition-directors-cut": 50,
        "codec-x265": 3000,
        "codec-x264": 0,
        "codec-av1": 4000,
        # Groupes de faible qualite: acceptables ici (petits fichiers)
        "lq-nahom": 0,
        "lq-oeplus": 0,
        "lq-4k4u": 0,
        "lq-aoc": 0,
        "lq-beyondhd-encode": 200,
        "lq-hds": 0,
        "lq-d3g": 0,
        "lq-flights": 0,
        "lq-classicalhd": 100,
        "lq-creative24": 100,
        "lq-depraved": 100,
        "lq-devisive": 100,
        "lq-drx": 100,
        "lq-blasphemy": 100,
        "lq-bols": 100,
        "lq-btm": 100,
        "lq-fgt": 100,
        "lq-ivy": 100,
        "lq-kc": 100,
    }),
)


# ====================
# Streaming
# ====================

STREAMING_PROFILE = ScoringProfile(
    id="streaming",
    name="Streaming",
    description="Streaming instantane, remplace des qu'une meilleure release existe",
    tags=("streaming", "instant", "placeholder", "auto-upgrade"),
    category="streaming",
    min_score=0,
    upgrade_until_score=100000,
    min_score_increment=1,
    allowed_protocols=(Protocol.STREAMING,),
    format_scores=_with_bans({"streaming-protocol": 50000}),
)


DEFAULT_PROFILES: list[ScoringProfile] = [
    BEST_PROFILE,
    EFFICIENT_PROFILE,
    MICRO_PROFILE,
    STREAMING_PROFILE,
]

PROFILE_BY_ID: dict[str, ScoringProfile] = {profile.id: profile for profile in DEFAULT_PROFILES}


def get_profile(profile_id: str) -> ScoringProfile:
    """
    Retourne un profil integre.

    Raises:
        ProfileNotFoundError: Si l'identifiant est inconnu.
    """
    try:
        return PROFILE_BY_ID[profile_id]
    except KeyError:
        raise ProfileNotFoundError(profile_id) from None


def create_custom_profile(base: ScoringProfile, **overrides) -> ScoringProfile:
    """
    Cree un profil personnalise a partir d'un profil de base.

    Les format_scores fournis completent (et surchargent) ceux du profil
    de base. Sans id ni name explicites, ils sont derives de la base.

    Args:
        base: Profil de depart
        **overrides: Champs de ScoringProfile a remplacer

    Returns:
        Nouveau profil (le profil de base n'est pas modifie).
    """
    format_scores = {**base.format_scores, **overrides.pop("format_scores", {})}
    overrides.setdefault("id", f"{base.id}-custom")
    overrides.setdefault("name", f"{base.name} (Custom)")
    logger.debug("Profil personnalise cree", base=base.id, profile=overrides["id"])
    return replace(base, format_scores=format_scores, **overrides)


def is_protocol_allowed(profile: ScoringProfile, protocol: Union[Protocol, str]) -> bool:
    """Indique si un profil accepte un protocole (enum ou valeur texte)."""
    try:
        wanted = Protocol(protocol)
    except ValueError:
        return False
    return wanted in profile.allowed_protocols


def apply_bans(
    profile: ScoringProfile, formats: Optional[Iterable[CustomFormat]] = None
) -> ScoringProfile:
    """
    Force le score de bannissement de chaque format banni dans un profil.

    Args:
        profile: Profil a completer
        formats: Registre considere (par defaut les formats integres)

    Returns:
        Profil dont les formats bannis valent BANNED_SCORE, quelles que
        soient ses surcharges.
    """
    registry = ALL_FORMATS if formats is None else formats
    banned = {fmt.id: BANNED_SCORE for fmt in registry if fmt.category is FormatCategory.BANNED}
    return replace(profile, format_scores={**profile.format_scores, **banned})
