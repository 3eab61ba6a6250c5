from __future__ import annotations

from crpt_api.core.domain.errors import RemoteRejectionError
from crpt_api.core.domain.models import BatchItemResult, SubmissionResult


def test_submission_result_ok_only_for_2xx():
    assert SubmissionResult(status_code=200).ok
    assert SubmissionResult(status_code=201).ok
    assert not SubmissionResult(status_code=302).ok
    assert not SubmissionResult(status_code=500).ok


def test_batch_item_result_ok():
    assert BatchItemResult(index=0, result=SubmissionResult(status_code=200)).ok
    assert not BatchItemResult(index=1, error=RemoteRejectionError(400, "bad")).ok
    assert not BatchItemResult(index=2).ok
