"""Tests for intervention video recommendation."""

import pytest
from pydantic import ValidationError

from app.schemas.screening import VideoCreate
from app.scoring.models import AnswerValue, Domain
from app.services.screening import score_domain
from app.services.videos import InterventionVideo, recommend_videos


def make_video(**overrides) -> InterventionVideo:
    fields = {
        "id": "v1",
        "title": "Talking with your baby",
        "video_url": "https://videos.example.org/talking",
        "domain": Domain.COMMUNICATION,
        "min_age_interval": 6,
        "max_age_interval": 12,
        "score_threshold": 25,
    }
    fields.update(overrides)
    return InterventionVideo(**fields)


class TestRecommendVideos:
    """Tests for recommend_videos."""

    def test_low_score_in_range_matches(self, make_answers) -> None:
        """Test a video is recommended for a low score in its interval range."""
        # 2 x YES = 20
        score = score_domain(
            Domain.COMMUNICATION, make_answers(Domain.COMMUNICATION, AnswerValue.YES, 2), 8
        )
        video = make_video()

        assert recommend_videos([video], [score], 8) == {Domain.COMMUNICATION: [video]}

    def test_threshold_is_exclusive(self, make_answers) -> None:
        """Test a score equal to the video threshold doesn't match."""
        score = score_domain(
            Domain.COMMUNICATION, make_answers(Domain.COMMUNICATION, AnswerValue.SOMETIMES, 5), 8
        )
        assert score.total_score == 25

        assert recommend_videos([make_video()], [score], 8) == {}

    @pytest.mark.parametrize(
        "overrides,interval",
        [
            ({"is_active": False}, 8),
            ({"domain": Domain.FINE_MOTOR}, 8),
            ({}, 4),
            ({}, 14),
        ],
    )
    def test_non_matching(self, overrides: dict, interval: int, make_answers) -> None:
        """Test inactive, other-domain and out-of-range videos are skipped."""
        score = score_domain(
            Domain.COMMUNICATION, make_answers(Domain.COMMUNICATION, AnswerValue.NOT_YET), interval
        )

        assert recommend_videos([make_video(**overrides)], [score], interval) == {}

    def test_range_bounds_inclusive(self, make_answers) -> None:
        """Test the interval range includes both ends."""
        video = make_video()
        for interval in (6, 12):
            score = score_domain(
                Domain.COMMUNICATION,
                make_answers(Domain.COMMUNICATION, AnswerValue.NOT_YET),
                interval,
            )
            assert recommend_videos([video], [score], interval) == {
                Domain.COMMUNICATION: [video]
            }

    def test_grouped_by_domain(self, make_answers) -> None:
        """Test recommendations are keyed by the scored domain."""
        scores = [
            score_domain(d, make_answers(d, AnswerValue.NOT_YET), 8)
            for d in (Domain.COMMUNICATION, Domain.GROSS_MOTOR)
        ]
        talking = make_video()
        crawling = make_video(id="v2", title="Tummy time", domain=Domain.GROSS_MOTOR)
        other = make_video(id="v3", title="Shapes", domain=Domain.PROBLEM_SOLVING)

        recommendations = recommend_videos([talking, crawling, other], scores, 8)

        assert recommendations == {
            Domain.COMMUNICATION: [talking],
            Domain.GROSS_MOTOR: [crawling],
        }


class TestVideoCreate:
    """Tests for video input validation."""

    def valid(self, **overrides) -> dict:
        data = {
            "id": "v1",
            "title": "Talking with your baby",
            "video_url": "https://videos.example.org/talking",
            "domain": "COMMUNICATION",
            "min_age_interval": 6,
            "max_age_interval": 12,
            "score_threshold": 25,
        }
        data.update(overrides)
        return data

    def test_valid_video(self) -> None:
        video = VideoCreate(**self.valid())
        assert video.domain == Domain.COMMUNICATION
        assert video.is_active is True

    @pytest.mark.parametrize(
        "overrides",
        [
            {"min_age_interval": 14, "max_age_interval": 12},
            {"min_age_interval": 1},
            {"max_age_interval": 61},
            {"score_threshold": 61},
            {"score_threshold": -1},
            {"video_url": "ftp://videos.example.org/talking"},
            {"title": "Hi"},
            {"domain": "LANGUAGE"},
        ],
    )
    def test_invalid_video(self, overrides: dict) -> None:
        """Test out-of-range or malformed video fields are rejected."""
        with pytest.raises(ValidationError):
            VideoCreate(**self.valid(**overrides))
