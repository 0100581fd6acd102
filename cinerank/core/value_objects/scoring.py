"""
Objets valeur du moteur de scoring.

Contient le profil de scoring (configuration utilisateur), le contexte
de validation de taille, la vue "attributs" d'une release et les
resultats produits par le scorer (score, decision d'upgrade, classement).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from cinerank.core.value_objects.custom_format import (
    ConditionMatchResult,
    CustomFormat,
)
from cinerank.core.value_objects.release import (
    AudioChannels,
    AudioCodec,
    Codec,
    EpisodeInfo,
    HdrFormat,
    ParsedRelease,
    Resolution,
    Source,
)


# Score qui bannit une release quel que soit le reste du calcul
BANNED_SCORE = -999999

DEFAULT_RESOLUTION_ORDER: tuple[Resolution, ...] = (
    Resolution.UHD_2160P,
    Resolution.FHD_1080P,
    Resolution.HD_720P,
    Resolution.SD_480P,
    Resolution.UNKNOWN,
)


class Protocol(Enum):
    """Protocole de telechargement d'une release."""

    TORRENT = "torrent"
    USENET = "usenet"
    STREAMING = "streaming"


class MediaKind(Enum):
    """Type de media pour la validation de taille."""

    MOVIE = "movie"
    TV = "tv"


@dataclass(frozen=True)
class PackPreference:
    """Bonus accordes aux packs de serie par rapport aux episodes isoles."""

    enabled: bool = True
    complete_series_bonus: int = 100
    multi_season_bonus: int = 75
    single_season_bonus: int = 50
    min_wanted_episodes_percent: int = 50


@dataclass(frozen=True)
class ScoringProfile:
    """
    Profil de scoring configurable.

    Attributs:
        id: Identifiant unique
        name: Nom affichable
        format_scores: Surcharges de score par id de format
        resolution_order: Resolutions acceptees, par ordre de preference
        allowed_protocols: Protocoles acceptes
        min_score: Score brut minimal pour accepter une release
        upgrade_until_score: Plafond d'upgrade (-1 = illimite)
        min_score_increment: Gain minimal pour declencher un upgrade
        upgrades_allowed: Autorise le remplacement d'une release existante
        movie_min_size_gb, movie_max_size_gb: Bornes de taille des films (Go)
        episode_min_size_mb, episode_max_size_mb: Bornes par episode (Mo)
        pack_preference: Bonus des packs de serie
    """

    id: str
    name: str
    description: str = ""
    tags: tuple[str, ...] = ()
    category: str = "custom"
    format_scores: dict[str, int] = field(default_factory=dict)
    resolution_order: tuple[Resolution, ...] = DEFAULT_RESOLUTION_ORDER
    allowed_protocols: tuple[Protocol, ...] = (Protocol.TORRENT, Protocol.USENET)
    min_score: int = 0
    upgrade_until_score: int = -1
    min_score_increment: int = 0
    upgrades_allowed: bool = True
    movie_min_size_gb: Optional[float] = None
    movie_max_size_gb: Optional[float] = None
    episode_min_size_mb: Optional[float] = None
    episode_max_size_mb: Optional[float] = None
    pack_preference: PackPreference = field(default_factory=PackPreference)


@dataclass(frozen=True)
class SizeContext:
    """
    Contexte de validation de taille.

    Attributs:
        media_kind: Film ou serie
        is_season_pack: Pack de saison (taille moyennee par episode)
        episode_count: Nombre d'episodes du pack (inconnu = pas de validation)
    """

    media_kind: MediaKind
    is_season_pack: bool = False
    episode_count: Optional[int] = None


@dataclass(frozen=True)
class ReleaseAttributes:
    """
    Vue d'une release utilisee par le scoring.

    Construite depuis un ParsedRelease par extract_attributes(), avec en
    plus la detection du service de streaming.
    """

    title: str
    clean_title: str
    year: Optional[int] = None
    resolution: Resolution = Resolution.UNKNOWN
    source: Source = Source.UNKNOWN
    codec: Codec = Codec.UNKNOWN
    hdr: Optional[HdrFormat] = None
    audio_codec: AudioCodec = AudioCodec.UNKNOWN
    audio_channels: AudioChannels = AudioChannels.UNKNOWN
    has_atmos: bool = False
    release_group: Optional[str] = None
    streaming_service: Optional[str] = None
    edition: Optional[str] = None
    languages: tuple[str, ...] = ("en",)
    is_remux: bool = False
    is_repack: bool = False
    is_proper: bool = False
    is_3d: bool = False
    episode: Optional[EpisodeInfo] = None

    @property
    def is_season_pack(self) -> bool:
        return self.episode is not None and self.episode.is_season_pack

    @property
    def is_complete_series(self) -> bool:
        return self.episode is not None and self.episode.is_complete_series

    @classmethod
    def from_parsed(
        cls, parsed: ParsedRelease, streaming_service: Optional[str] = None
    ) -> "ReleaseAttributes":
        """Construit les attributs depuis un ParsedRelease."""
        return cls(
            title=parsed.original_title,
            clean_title=parsed.clean_title,
            year=parsed.year,
            resolution=parsed.resolution,
            source=parsed.source,
            codec=parsed.codec,
            hdr=parsed.hdr,
            audio_codec=parsed.audio_codec,
            audio_channels=parsed.audio_channels,
            has_atmos=parsed.has_atmos,
            release_group=parsed.release_group,
            streaming_service=streaming_service,
            edition=parsed.edition,
            languages=parsed.languages,
            is_remux=parsed.is_remux,
            is_repack=parsed.is_repack,
            is_proper=parsed.is_proper,
            is_3d=parsed.is_3d,
            episode=parsed.episode,
        )


@dataclass(frozen=True)
class ScoredFormat:
    """Format ayant correspondu avec le score retenu par le profil."""

    format: CustomFormat
    score: int
    condition_results: tuple[ConditionMatchResult, ...] = ()


@dataclass(frozen=True)
class CategoryBreakdown:
    """Contribution d'une categorie de formats au score total."""

    score: int = 0
    formats: tuple[str, ...] = ()


@dataclass(frozen=True)
class ScoringResult:
    """
    Resultat complet du scoring d'une release.

    Attributs:
        release_name: Titre evalue
        profile_id: Profil utilise
        total_score: Score brut (non borne, -inf si bannie)
        matched_formats: Formats retenus avec leur score
        breakdown: Detail par categorie
        meets_minimum: Release acceptable pour le profil
        is_banned: Au moins un format de bannissement a correspondu
        banned_reasons: Noms des formats de bannissement
        size_rejected: Taille hors des bornes du profil
        size_rejection_reason: Explication du rejet de taille
        resolution_rejected: Resolution absente de l'ordre du profil
        resolution_rejection_reason: Explication du rejet de resolution
        pack_bonus: Bonus de pack inclus dans le total
    """

    release_name: str
    profile_id: str
    total_score: float
    matched_formats: tuple[ScoredFormat, ...] = ()
    breakdown: dict[str, CategoryBreakdown] = field(default_factory=dict)
    meets_minimum: bool = False
    is_banned: bool = False
    banned_reasons: tuple[str, ...] = ()
    size_rejected: bool = False
    size_rejection_reason: Optional[str] = None
    resolution_rejected: bool = False
    resolution_rejection_reason: Optional[str] = None
    pack_bonus: int = 0

    @property
    def is_rejected(self) -> bool:
        """Release rejetee pour une raison autre que le score minimal."""
        return self.is_banned or self.size_rejected or self.resolution_rejected

    @property
    def matched_format_ids(self) -> tuple[str, ...]:
        return tuple(scored.format.id for scored in self.matched_formats)


@dataclass(frozen=True)
class UpgradeDecision:
    """Decision d'upgrade d'une release existante vers une candidate."""

    is_upgrade: bool
    improvement: float
    existing_result: ScoringResult
    candidate_result: ScoringResult


@dataclass(frozen=True)
class ReleaseComparison:
    """Comparaison de deux releases ("first", "second" ou "tie")."""

    winner: str
    first_result: ScoringResult
    second_result: ScoringResult
    score_difference: float


@dataclass(frozen=True)
class RankedRelease:
    """Release classee (rang a partir de 1)."""

    rank: int
    result: ScoringResult


@dataclass(frozen=True)
class ReleaseCandidate:
    """
    Release a classer: titre et informations optionnelles.

    Attributs:
        name: Titre brut de la release
        attributes: Attributs deja extraits (sinon le titre est parse)
        size_bytes: Taille du fichier pour la validation de taille
        size_context: Contexte film/serie de la validation de taille
    """

    name: str
    attributes: Optional[ReleaseAttributes] = None
    size_bytes: Optional[int] = None
    size_context: Optional[SizeContext] = None
