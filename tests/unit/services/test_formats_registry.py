"""
Tests unitaires pour le registre des formats integres.

Verifie l'integrite du registre (ids uniques, motifs surs) et le
comportement des formats les plus sensibles sur des titres reels.
"""

import pytest

from cinerank.core.value_objects import FormatCategory
from cinerank.services.formats import (
    ALL_FORMATS,
    FORMAT_BY_ID,
    get_format,
    get_formats_by_category,
    get_formats_by_tag,
)
from cinerank.services.release_scorer import get_matched_format_ids
from cinerank.services.safe_regex import is_safe_pattern


class TestRegistryIntegrity:
    """Tests d'integrite du registre."""

    def test_ids_are_unique(self) -> None:
        """Test unicite des identifiants."""
        ids = [fmt.id for fmt in ALL_FORMATS]

        assert len(ids) == len(set(ids))
        assert len(FORMAT_BY_ID) == len(ALL_FORMATS)

    def test_all_patterns_are_safe(self) -> None:
        """Test que chaque motif integre passe la porte de securite."""
        unsafe = [
            (fmt.id, condition.pattern)
            for fmt in ALL_FORMATS
            for condition in fmt.conditions
            if condition.pattern is not None and not is_safe_pattern(condition.pattern)
        ]

        assert unsafe == []

    def test_every_category_is_populated(self) -> None:
        """Test qu'aucune categorie n'est vide."""
        for category in FormatCategory:
            assert get_formats_by_category(category), category

    def test_get_format(self) -> None:
        """Test acces par identifiant."""
        assert get_format("2160p-remux").category is FormatCategory.RESOLUTION
        assert get_format("does-not-exist") is None

    def test_get_formats_by_tag_case_insensitive(self) -> None:
        """Test filtrage par etiquette insensible a la casse."""
        lower = {fmt.id for fmt in get_formats_by_tag("remux")}
        upper = {fmt.id for fmt in get_formats_by_tag("REMUX")}

        assert lower == upper
        assert "2160p-remux" in lower


def _ids(title: str) -> list[str]:
    return get_matched_format_ids(title)


class TestResolutionFormats:
    """Tests des formats resolution + source."""

    def test_remux_not_counted_as_bluray(self) -> None:
        """Test qu'un remux ne declenche pas le format encode BluRay."""
        ids = _ids("Movie.2020.1080p.BluRay.REMUX.AVC.DTS-HD.MA.5.1-FraMeSToR")

        assert "1080p-remux" in ids
        assert "1080p-bluray" not in ids

    def test_webdl_hevc_exclusive(self) -> None:
        """Test que le WEB-DL HEVC a son propre format."""
        ids = _ids("Movie.2020.1080p.WEB-DL.DDP5.1.x265-GRP")

        assert "1080p-webdl-hevc" in ids
        assert "1080p-webdl" not in ids


class TestGroupTiers:
    """Tests des tiers de groupes."""

    def test_quality_tier_requires_resolution(self) -> None:
        """Test tier 1080p: groupe et resolution requis."""
        assert "1080p-quality-tier-1" in _ids("Movie.2020.1080p.BluRay.x264-CtrlHD")
        assert "1080p-quality-tier-1" not in _ids("Movie.2020.720p.BluRay.x264-CtrlHD")

    def test_efficient_tier_one(self) -> None:
        """Test tier efficace: groupes x265 dedies."""
        assert "1080p-efficient-tier-1" in _ids("Movie.2020.1080p.BluRay.x265-Tigole")


class TestHdrFormats:
    """Tests des formats HDR."""

    def test_dolby_vision_with_fallback(self) -> None:
        """Test DV avec HDR10: format DV et format HDR10 correspondent."""
        ids = _ids("Movie.2023.2160p.WEB-DL.DV.HDR10.DDP5.1.Atmos.H.265-GRP")

        assert "hdr-dolby-vision" in ids
        assert "hdr-hdr10" in ids
        assert "hdr-dolby-vision-no-fallback" not in ids

    def test_dolby_vision_without_fallback(self) -> None:
        """Test DV seul en WEB-DL: format sans repli uniquement."""
        ids = _ids("Movie.2023.2160p.WEB-DL.DV.DDP5.1.H.265-GRP")

        assert "hdr-dolby-vision-no-fallback" in ids
        assert "hdr-dolby-vision" not in ids

    def test_hdr10plus_not_hdr10(self) -> None:
        """Test HDR10+ distinct de HDR10."""
        ids = _ids("Movie.2023.2160p.AMZN.WEB-DL.HDR10+.DDP5.1.H.265-GRP")

        assert "hdr-hdr10plus" in ids
        assert "hdr-hdr10" not in ids


class TestAudioFormats:
    """Tests des formats audio."""

    def test_truehd_atmos(self) -> None:
        """Test TrueHD et Atmos cumules."""
        ids = _ids("Movie.2020.2160p.UHD.BluRay.REMUX.HDR.HEVC.TrueHD.Atmos.7.1-GRP")

        assert "audio-truehd" in ids
        assert "audio-atmos" in ids

    def test_ddplus_is_not_dd(self) -> None:
        """Test que DD+ n'est pas compte comme Dolby Digital."""
        ids = _ids("Movie.2020.1080p.WEB-DL.DDP5.1.H.264-GRP")

        assert "audio-ddplus" in ids
        assert "audio-dd" not in ids

    def test_dts_hdma_is_not_dts(self) -> None:
        """Test que DTS-HD MA exclut le DTS de base."""
        ids = _ids("Movie.2020.1080p.BluRay.DTS-HD.MA.5.1.x264-GRP")

        assert "audio-dts-hdma" in ids
        assert "audio-dts" not in ids


class TestStreamingFormats:
    """Tests des formats de streaming."""

    @pytest.mark.parametrize(
        "title,format_id",
        [
            ("Movie.2023.1080p.AMZN.WEB-DL.DDP5.1.H.264-GRP", "streaming-amzn"),
            ("Movie.2023.1080p.iT.WEB-DL.DD5.1.H.264-GRP", "streaming-it"),
            ("Movie.2023.1080p.MA.WEB-DL.DDP5.1.H.264-GRP", "streaming-ma"),
            ("Movie.2023.1080p.WEB-DL [Streaming]", "streaming-protocol"),
        ],
    )
    def test_services(self, title: str, format_id: str) -> None:
        """Test detection des services de streaming."""
        assert format_id in _ids(title)

    def test_short_tokens_case_sensitive(self) -> None:
        """Test que les mots du titre ne declenchent pas iT, NOW ou MAX."""
        ids = _ids("Now.Its.Max.2013.1080p.BluRay.x264-GRP")

        assert "streaming-now" not in ids
        assert "streaming-max" not in ids
        assert "streaming-it" not in ids

    def test_dts_hd_ma_is_not_movies_anywhere(self) -> None:
        """Test que le MA de DTS-HD.MA n'est pas Movies Anywhere."""
        assert "streaming-ma" not in _ids("Movie.2020.1080p.BluRay.DTS-HD.MA.5.1.x264-GRP")


class TestBannedAndGroups:
    """Tests des formats bannis, micro et faible qualite."""

    @pytest.mark.parametrize(
        "title,format_id",
        [
            ("Movie.2023.CAM.x264-GRP", "banned-cam"),
            ("Movie.2023.HDTS.x264-GRP", "banned-telesync"),
            ("Movie.2023.1080p.WEB-DL.DDP5.1.H.264-AROMA", "banned-aroma"),
            ("Movie.2023.2160p.WEB-DL.x264-GRP", "banned-x264-2160p"),
            ("Movie.2020.1080p.BluRay.x264.Sample-GRP", "banned-sample"),
            ("Movie.2020.DVDRip.XviD-GRP", "banned-xvid"),
        ],
    )
    def test_banned(self, title: str, format_id: str) -> None:
        """Test declenchement des formats bannis."""
        assert format_id in _ids(title)

    def test_micro_by_title_suffix(self) -> None:
        """Test micro YTS reconnu par le suffixe d'indexeur."""
        assert "micro-yts" in _ids("Movie.2020.1080p.BluRay.x264-YTS.MX")

    def test_beyondhd_remux_not_penalized(self) -> None:
        """Test que seuls les encodes BeyondHD sont penalises."""
        assert "lq-beyondhd-encode" in _ids("Movie.2020.1080p.BluRay.x264-BeyondHD")
        assert "lq-beyondhd-encode" not in _ids("Movie.2020.1080p.BluRay.REMUX.AVC-BeyondHD")


class TestEnhancementFormats:
    """Tests des repacks, editions et codecs."""

    def test_repack_versions_exclusive(self) -> None:
        """Test REPACK2 ne declenche pas le repack v1."""
        ids = _ids("Movie.2020.1080p.BluRay.REPACK2.x264-GRP")

        assert "repack-2" in ids
        assert "repack-1" not in ids

    def test_non_imax_ignored(self) -> None:
        """Test qu'une version NON-IMAX n'est pas IMAX."""
        assert "edition-imax" not in _ids("Movie.2020.NON-IMAX.1080p.WEB-DL.x264-GRP")
        assert "edition-imax" in _ids("Movie.2020.IMAX.1080p.WEB-DL.x264-GRP")

    def test_x264_excluded_in_2160p(self) -> None:
        """Test format x264 absent en 2160p (banni a part)."""
        assert "codec-x264" in _ids("Movie.2020.1080p.BluRay.x264-GRP")
        assert "codec-x264" not in _ids("Movie.2020.2160p.WEB-DL.x264-GRP")
