import pytest

from core.batching.batch_delete import BatchDeleteOrchestrator, chunk_ids
from core.models.batch import BatchDeleteSummary, SuccessPolicy


def make_ids(count: int) -> list[str]:
    return [f"business-images/img_{i}" for i in range(count)]


class TestChunkIds:
    def test_contiguous_chunks_in_order(self) -> None:
        ids = make_ids(250)

        chunks = list(chunk_ids(ids))

        assert [len(chunk) for chunk in chunks] == [100, 100, 50]
        assert [pid for chunk in chunks for pid in chunk] == ids

    def test_invalid_size(self) -> None:
        with pytest.raises(ValueError):
            list(chunk_ids(["a"], 0))


class TestBatchDeleteOrchestrator:
    def test_single_batch_all_deleted(self, media_storage, fake_adapter) -> None:
        ids = make_ids(3)

        summary = BatchDeleteOrchestrator(media_storage).run(ids)

        assert summary.success is True
        assert summary.total_requested == 3
        assert summary.successful == 3
        assert summary.failed == 0
        assert len(summary.results) == 1
        assert fake_adapter.calls_for("delete_resources") == [{"public_ids": ids}]

    def test_batches_are_sent_sequentially_in_order(self, media_storage, fake_adapter) -> None:
        ids = make_ids(250)

        BatchDeleteOrchestrator(media_storage).run(ids)

        sent = [call["public_ids"] for call in fake_adapter.calls_for("delete_resources")]
        assert sent == [ids[:100], ids[100:200], ids[200:]]

    def test_failed_second_batch_is_isolated(self, media_storage, fake_adapter) -> None:
        ids = make_ids(150)
        fake_adapter.failing_batches = {2}

        summary = BatchDeleteOrchestrator(media_storage).run(ids)

        assert summary.success is True
        assert summary.successful == 100
        assert summary.failed == 50
        assert summary.results[1] == {"error": "Rate Limit Exceeded", "batch": ids[100:]}
        assert summary.message == "Deleted 100 images successfully, 50 failed"

    def test_all_batches_failing(self, media_storage, fake_adapter) -> None:
        ids = make_ids(150)
        fake_adapter.failing_batches = {1, 2}

        summary = BatchDeleteOrchestrator(media_storage).run(ids)

        assert summary.success is False
        assert summary.successful == 0
        assert summary.failed == 150
        assert all("error" in result for result in summary.results)

    def test_not_found_status_counts_as_failure(self, media_storage, fake_adapter) -> None:
        ids = ["a", "b", "c"]
        fake_adapter.delete_statuses = {"b": "not_found"}

        summary = BatchDeleteOrchestrator(media_storage).run(ids)

        assert summary.successful == 2
        assert summary.failed == 1
        assert summary.success is True

    def test_all_policy_requires_every_deletion(self, media_storage, fake_adapter) -> None:
        fake_adapter.delete_statuses = {"b": "not_found"}

        orchestrator = BatchDeleteOrchestrator(media_storage, success_policy=SuccessPolicy.ALL)

        assert orchestrator.run(["a", "b"]).success is False
        fake_adapter.delete_statuses = {}
        assert orchestrator.run(["a", "b"]).success is True

    def test_duplicate_ids_count_every_occurrence(self, media_storage, fake_adapter) -> None:
        summary = BatchDeleteOrchestrator(media_storage).run(["dup", "dup", "x"])

        assert summary.total_requested == 3
        assert summary.successful == 3
        assert summary.failed == 0

    def test_duplicate_failures_count_every_occurrence(self, media_storage, fake_adapter) -> None:
        fake_adapter.delete_statuses = {"dup": "not_found"}

        summary = BatchDeleteOrchestrator(media_storage).run(["dup", "x", "dup"])

        assert summary.successful == 1
        assert summary.failed == 2

    def test_id_missing_from_answer_counts_as_failed(self, media_storage, monkeypatch) -> None:
        monkeypatch.setattr(
            media_storage, "delete_assets", lambda ids: {"deleted": {"a": "deleted"}}
        )

        summary = BatchDeleteOrchestrator(media_storage).run(["a", "b"])

        assert summary.successful == 1
        assert summary.failed == 1
        assert summary.successful + summary.failed == summary.total_requested

    def test_empty_input_is_rejected(self, media_storage, fake_adapter) -> None:
        with pytest.raises(ValueError):
            BatchDeleteOrchestrator(media_storage).run([])

        assert fake_adapter.calls_for("delete_resources") == []


class TestBatchDeleteSummary:
    def test_message_without_failures(self) -> None:
        summary = BatchDeleteSummary(
            success=True, total_requested=2, successful=2, failed=0, results=[]
        )

        assert summary.message == "Deleted 2 images successfully"
