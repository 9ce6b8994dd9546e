import asyncio
from datetime import datetime
from decimal import Decimal

import pytest

from ledger_ui.controllers import PrintableDocumentAssembler
from ledger_ui.errors import LoadError, NotFoundError, TransportError, ValidationError
from ledger_ui.lib.fallbacks import Origin, with_fallback
from ledger_ui.models import IssuerProfile, LoadState, fallback_issuer
from ledger_ui.services import DemoDocumentService

LOADED_AT = datetime(2025, 7, 15, 9, 0, 0)


def _assembler(service) -> PrintableDocumentAssembler:
    return PrintableDocumentAssembler(service, clock=lambda: LOADED_AT)


class BrokenIssuerService(DemoDocumentService):
    def __init__(self, failure, **kwargs):
        super().__init__(**kwargs)
        self.failure = failure

    async def get_issuer_profile(self):
        raise self.failure


class MalformedIssuerService(DemoDocumentService):
    async def get_issuer_profile(self):
        return {"id": 1, "name": "Orion", "createdAt": "not a timestamp"}


class OverlapService(DemoDocumentService):
    """Document fetch completes only after the issuer fetch has started."""

    def __init__(self):
        super().__init__()
        self.issuer_started = asyncio.Event()

    async def get_document(self, document_id):
        await self.issuer_started.wait()
        return await super().get_document(document_id)

    async def get_issuer_profile(self):
        self.issuer_started.set()
        return await super().get_issuer_profile()


def test_load_merges_document_and_fetched_issuer() -> None:
    assembler = _assembler(DemoDocumentService())

    bundle = asyncio.run(assembler.load(1))

    assert assembler.state is LoadState.READY
    assert assembler.bundle is bundle
    assert assembler.issuer_origin is Origin.FETCHED
    assert assembler.print_title == "Invoice TIR-1001"
    assert bundle.issuer.name == "Orion Hardware Ltd."
    assert bundle.issuer.tax_id == "514789632"
    assert bundle.issuer.updated_at.microsecond == 123456
    assert bundle.document.document_date == datetime(2025, 7, 1, 10, 30)
    assert bundle.document.created_at == datetime(2025, 7, 1, 10, 31, 7, 512000)
    assert len(bundle.document.lines) == 2
    assert bundle.document.lines[0].tax_rate == Decimal("17")
    assert bundle.document.lines[1].sku == "CBL-HD2"


def test_fetches_run_concurrently() -> None:
    assembler = _assembler(OverlapService())

    bundle = asyncio.run(asyncio.wait_for(assembler.load(2), timeout=2))

    assert bundle.document.document_number == "TIR-1002"


@pytest.mark.parametrize(
    "service",
    [
        DemoDocumentService(issuer=None),
        BrokenIssuerService(TransportError("timed out")),
        BrokenIssuerService(RuntimeError("unexpected")),
        MalformedIssuerService(),
    ],
    ids=["missing", "transport", "unexpected", "malformed"],
)
def test_issuer_failure_substitutes_fallback(service) -> None:
    assembler = _assembler(service)

    bundle = asyncio.run(assembler.load(1))

    assert bundle.issuer == fallback_issuer(LOADED_AT)
    assert bundle.issuer == IssuerProfile(
        id="1",
        name="My Company",
        tax_id="123456789",
        address="Company Address",
        currency="ILS",
        phone="03-1234567",
        email="info@company.co.il",
        website="www.company.co.il",
        created_at=LOADED_AT,
        updated_at=LOADED_AT,
    )
    assert bundle.document.document_number == "TIR-1001"
    assert assembler.issuer_origin is Origin.FALLBACK
    assert assembler.state is LoadState.READY


@pytest.mark.parametrize("issuer", [DemoDocumentService().issuer, None], ids=["issuer-ok", "issuer-missing"])
def test_document_failure_fails_whole_load(issuer) -> None:
    assembler = _assembler(DemoDocumentService(issuer=issuer))

    with pytest.raises(LoadError) as info:
        asyncio.run(assembler.load(404))

    assert isinstance(info.value.__cause__, NotFoundError)
    assert assembler.state is LoadState.FAILED
    assert assembler.bundle is None
    assert assembler.print_title is None
    assert assembler.error


def test_unparseable_document_fails_load() -> None:
    service = DemoDocumentService(documents=[{"id": 1, "documentNumber": "TIR-1", "documentDate": "soon"}])
    assembler = _assembler(service)

    with pytest.raises(LoadError) as info:
        asyncio.run(assembler.load(1))

    assert isinstance(info.value.__cause__, ValidationError)
    assert assembler.state is LoadState.FAILED


def test_reload_after_failure_recovers() -> None:
    assembler = _assembler(DemoDocumentService())
    with pytest.raises(LoadError):
        asyncio.run(assembler.load(99))

    asyncio.run(assembler.load(3))

    assert assembler.state is LoadState.READY
    assert assembler.error is None
    assert assembler.bundle.document.document_number == "TIR-1003"


def test_with_fallback_prefers_primary() -> None:
    calls = []

    async def primary():
        return "fetched"

    def fallback():
        calls.append("fallback")
        return "default"

    result = asyncio.run(with_fallback(primary, fallback, label="Value"))

    assert (result.value, result.origin, result.is_fallback) == ("fetched", Origin.FETCHED, False)
    assert calls == []


def test_with_fallback_records_reason() -> None:
    async def primary():
        raise NotFoundError("gone")

    result = asyncio.run(with_fallback(primary, lambda: "default", label="Value"))

    assert result.value == "default"
    assert result.is_fallback
    assert result.reason == "gone"


class GatedPrintService(DemoDocumentService):
    """Document fetches wait on a per-id gate; the first issuer calls can fail."""

    def __init__(self, failing_issuer_calls=0):
        super().__init__()
        self.gates: dict[int, asyncio.Event] = {}
        self.started: dict[int, asyncio.Event] = {}
        self.failing_issuer_calls = failing_issuer_calls

    async def get_document(self, document_id):
        self.started.setdefault(document_id, asyncio.Event()).set()
        if document_id in self.gates:
            await self.gates[document_id].wait()
        return await super().get_document(document_id)

    async def get_issuer_profile(self):
        if self.failing_issuer_calls:
            self.failing_issuer_calls -= 1
            raise TransportError("issuer timed out")
        return await super().get_issuer_profile()


def test_stale_load_result_does_not_replace_newer_bundle() -> None:
    service = GatedPrintService(failing_issuer_calls=1)
    service.gates[1] = asyncio.Event()
    assembler = _assembler(service)

    async def scenario():
        stale = asyncio.create_task(assembler.load(1))
        await service.started.setdefault(1, asyncio.Event()).wait()
        newer = await assembler.load(2)
        service.gates[1].set()
        return newer, await stale

    newer, stale = asyncio.run(scenario())

    assert stale.document.document_number == "TIR-1001"
    assert stale.issuer == fallback_issuer(LOADED_AT)
    assert assembler.bundle is newer
    assert assembler.print_title == "Invoice TIR-1002"
    assert assembler.issuer_origin is Origin.FETCHED
    assert assembler.state is LoadState.READY


def test_stale_load_failure_does_not_fail_newer_load() -> None:
    service = GatedPrintService()
    service.gates[99] = asyncio.Event()
    assembler = _assembler(service)

    async def scenario():
        stale = asyncio.create_task(assembler.load(99))
        await service.started.setdefault(99, asyncio.Event()).wait()
        newer = await assembler.load(2)
        service.gates[99].set()
        with pytest.raises(LoadError):
            await stale
        return newer

    newer = asyncio.run(scenario())

    assert assembler.state is LoadState.READY
    assert assembler.error is None
    assert assembler.bundle is newer
    assert assembler.bundle.document.document_number == "TIR-1002"
