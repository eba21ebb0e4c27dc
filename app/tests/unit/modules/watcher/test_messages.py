"""Unit tests for notification message composition."""

import pytest

from infrastructure.notifications.models import AttachmentColor
from modules.watcher.events import LifecycleEvent
from modules.watcher.messages import HISTORY_NOT_AVAILABLE, compose

DIFF_LINK = (
    "https://ci.example.com/job/job-A/jobConfigHistory/showDiffFiles"
    "?timestamp1=T1&timestamp2=T2"
)


@pytest.mark.unit
class TestCompose:
    """Tests for compose()."""

    def test_rename_mentions_both_names_and_current_url(self, job_factory):
        job = job_factory(name="job-B")

        payload = compose(LifecycleEvent.renamed("job-A", "job-B"), job, "alice")

        assert payload.message == (
            "<@alice> renamed from job-A to <https://ci.example.com/job/job-B/|job-B>"
        )
        assert payload.attachments[0].color == AttachmentColor.WARNING

    def test_update_message(self, job_factory):
        job = job_factory(name="job-A", display_name="Job A")

        payload = compose(LifecycleEvent.updated(), job, "alice")

        assert payload.message == (
            "<@alice> updated <https://ci.example.com/job/job-A/|Job A>"
        )
        assert payload.attachments[0].color == AttachmentColor.WARNING

    def test_delete_message_is_danger(self, job_factory):
        payload = compose(LifecycleEvent.deleted(), job_factory(), "bob")

        assert payload.message == (
            "<@bob> deleted <https://ci.example.com/job/job-A/|job-A>"
        )
        assert payload.attachments[0].color == AttachmentColor.DANGER

    def test_attachment_links_the_diff(self, job_factory):
        payload = compose(LifecycleEvent.updated(), job_factory(), "alice", DIFF_LINK)

        assert len(payload.attachments) == 1
        assert payload.attachments[0].text == (
            f"Please check <{DIFF_LINK}|here> for the changes"
        )

    @pytest.mark.parametrize(
        "event",
        [
            LifecycleEvent.renamed("old", "job-A"),
            LifecycleEvent.updated(),
            LifecycleEvent.deleted(),
        ],
    )
    def test_attachment_fallback_without_history(self, job_factory, event):
        payload = compose(event, job_factory(), "alice", None)

        assert payload.attachments[0].text == HISTORY_NOT_AVAILABLE

    def test_rejects_empty_actor(self, job_factory):
        with pytest.raises(ValueError):
            compose(LifecycleEvent.updated(), job_factory(), "")

    def test_rejects_empty_job_name(self, job_factory):
        job = job_factory()
        job.name = ""

        with pytest.raises(ValueError):
            compose(LifecycleEvent.updated(), job, "alice")

    def test_slack_attachments(self, job_factory):
        payload = compose(LifecycleEvent.deleted(), job_factory(), "alice", DIFF_LINK)

        assert payload.to_slack() == [
            {
                "text": f"Please check <{DIFF_LINK}|here> for the changes",
                "color": "danger",
            }
        ]
