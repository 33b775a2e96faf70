import pytest

from quotelint.model import (
    Scalar,
    SegmentationError,
    WrittenForm,
    build_clusters,
    build_literal_model,
)
from quotelint.unicode import Category, FixedBoundarySegmenter, RegexGraphemeSegmenter, classify
from tests._shared_cases import LITERAL_CASES, LiteralCase, case_id, codepoints


def _scalars(text: str) -> list[Scalar]:
    return [Scalar(ord(ch), classify(ord(ch))) for ch in text]


def test_regex_segmenter_reports_start_and_end_boundaries() -> None:
    segmenter = RegexGraphemeSegmenter()

    assert tuple(segmenter.segment(codepoints("abc"))) == (0, 1, 2, 3)
    assert tuple(segmenter.segment(codepoints("Cafe\N{COMBINING ACUTE ACCENT}"))) == (0, 1, 2, 3, 5)
    assert tuple(segmenter.segment(codepoints("line\r\n"))) == (0, 1, 2, 3, 4, 6)
    assert tuple(segmenter.segment([])) == (0,)


def test_cluster_has_anchor_and_attached_scalars() -> None:
    model = build_literal_model(codepoints("\U0001f44d\U0001f3fdx"))

    assert len(model.clusters) == 2
    thumbs, x = model.clusters
    assert thumbs.anchor.codepoint == 0x1F44D
    assert [scalar.codepoint for scalar in thumbs.attached] == [0x1F3FD]
    assert thumbs.attached[0].category == Category.MODIFIER
    assert thumbs.is_isolated is False
    assert x.is_isolated is True
    assert x.attached == ()
    assert x.range.as_tuple() == (2, 3)


def test_lone_combining_mark_is_its_own_cluster() -> None:
    model = build_literal_model(codepoints("\N{COMBINING DIAERESIS}"))

    assert len(model.clusters) == 1
    assert model.clusters[0].is_isolated
    assert model.clusters[0].anchor.category == Category.MODIFIER


def test_modifier_after_newline_is_isolated() -> None:
    model = build_literal_model(codepoints("Ü\n\U0001f3fb"))

    assert [len(cluster.scalars) for cluster in model.clusters] == [1, 1, 1]
    assert model.clusters[2].anchor.codepoint == 0x1F3FB


@pytest.mark.parametrize("case", LITERAL_CASES, ids=case_id)
def test_clusters_reproduce_the_original_sequence(case: LiteralCase) -> None:
    model = build_literal_model(codepoints(case.content))

    assert model.codepoints == tuple(codepoints(case.content))
    assert len(model) == len(case.content)
    assert [cluster.index for cluster in model.clusters] == list(range(len(model.clusters)))
    offset = 0
    for cluster in model.clusters:
        assert cluster.start == offset
        offset = cluster.end


def test_injected_segmenter_controls_clustering() -> None:
    model = build_literal_model(
        codepoints("A\N{COMBINING DIAERESIS}"),
        FixedBoundarySegmenter((0, 1, 2)),
    )

    assert [cluster.is_isolated for cluster in model.clusters] == [True, True]


def test_written_forms_are_attached_to_scalars() -> None:
    model = build_literal_model(
        codepoints("a\""),
        written=[WrittenForm.LITERAL, WrittenForm.SPECIAL_ESCAPE],
    )

    assert [scalar.written for scalar in model.scalars] == [
        WrittenForm.LITERAL,
        WrittenForm.SPECIAL_ESCAPE,
    ]


def test_written_forms_default_to_unspecified() -> None:
    model = build_literal_model(codepoints("ab"))

    assert {scalar.written for scalar in model.scalars} == {WrittenForm.UNSPECIFIED}


def test_written_forms_must_align_with_codepoints() -> None:
    with pytest.raises(ValueError, match="Expected 2 written forms"):
        build_literal_model(codepoints("ab"), written=[WrittenForm.LITERAL])


def test_empty_literal_accepts_empty_or_zero_boundaries() -> None:
    assert build_clusters([], []) == []
    assert build_clusters([], [0]) == []


@pytest.mark.parametrize(
    ("boundaries", "message"),
    [
        ((0, 2), "Last boundary must be 3"),
        ((1, 3), "First boundary must be 0"),
        ((0, 2, 2, 3), "strictly increase"),
        ((0, 4, 3), "strictly increase"),
        ((0,), "at least two boundaries"),
        ((0, 1.5, 3), "must be integers"),
    ],
)
def test_inconsistent_boundaries_raise_segmentation_error(
    boundaries: tuple[int, ...],
    message: str,
) -> None:
    with pytest.raises(SegmentationError, match=message):
        build_clusters(_scalars("abc"), boundaries)


def test_segmentation_error_propagates_from_model_builder() -> None:
    with pytest.raises(SegmentationError):
        build_literal_model(codepoints("abc"), FixedBoundarySegmenter((0, 5)))


def test_non_empty_boundaries_for_empty_literal_are_rejected() -> None:
    with pytest.raises(SegmentationError, match="Last boundary must be 0"):
        build_clusters([], (0, 1))
