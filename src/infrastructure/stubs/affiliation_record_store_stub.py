"""Affiliation record store stub implementation.

This module provides an in-memory stub implementation of
AffiliationRecordStoreProtocol for development and testing purposes.

Records are kept as camelCase wire payloads (the format the real store
speaks) and converted through AffiliationRecordDTO on every call, so the
stub exercises the same mapping a network adapter would.
"""

from __future__ import annotations

import asyncio
from typing import Any

from uuid6 import uuid7

from src.application.dtos.affiliation_record import AffiliationRecordDTO
from src.application.ports.affiliation_record_store import (
    AffiliationRecordStoreProtocol,
    SubmissionReceipt,
)
from src.domain.errors import CollaboratorUnavailableError, RecordAlreadyDecidedError
from src.domain.models.affiliation_record import AffiliationRecord
from src.domain.models.moderation import ModerationStatus
from src.domain.services.field_validators import normalize_document_number

NEW_RECORD_MESSAGE = "Filiação recebida! Sua ficha está em análise."

# Demo data mirroring the enrollment form's reference records.
DEMO_MEMBER_DOCUMENT_NUMBER = "123.456.789-09"

_DEMO_PAYLOADS: tuple[dict[str, Any], ...] = (
    {
        "id": "usr_123",
        "status": "approved",
        "cpf": DEMO_MEMBER_DOCUMENT_NUMBER,
        "fullName": "João da Silva Intelis",
        "email": "joao@intelis.org.br",
        "phone": "(61) 99999-8888",
        "birthDate": "1990-01-01",
        "termsAccepted": True,
        "statuteAccepted": True,
        "cep": "70000-000",
        "addressState": "DF",
        "city": "Brasília",
        "street": "Esplanada dos Ministérios",
        "district": "Zona Cívico-Administrativa",
        "number": "100",
        "motherName": "Maria da Silva",
        "profession": "Administrador(a)",
        "educationLevel": "sup_comp",
        "religion": "catolica",
        "electoralState": "DF",
        "electoralCity": "Brasília",
        "voterTitle": "123456789012",
    },
    {
        "id": "pend_1",
        "status": "pending",
        "fullName": "Ana Souza",
        "cpf": "987.654.321-00",
        "email": "ana.souza@email.com",
        "phone": "(11) 98888-7777",
        "birthDate": "1995-05-12",
        "city": "São Paulo",
        "addressState": "SP",
        "motherName": "Clara Souza",
        "voterTitle": "123412341234",
        "selfie": "https://randomuser.me/api/portraits/women/44.jpg",
        "docFront": "frente.jpg",
        "docBack": "verso.jpg",
    },
    {
        "id": "pend_2",
        "status": "pending",
        "fullName": "Carlos Pereira",
        "cpf": "111.444.777-35",
        "email": "carlos.p@email.com",
        "phone": "(21) 97777-6666",
        "birthDate": "1988-11-23",
        "city": "Rio de Janeiro",
        "addressState": "RJ",
        "motherName": "Joana Pereira",
        "voterTitle": "432143214321",
        "selfie": "https://randomuser.me/api/portraits/men/32.jpg",
        "docFront": "frente.jpg",
        "docBack": "verso.jpg",
    },
)


class AffiliationRecordStoreStub(AffiliationRecordStoreProtocol):
    """In-memory stub implementation of AffiliationRecordStoreProtocol.

    It is NOT suitable for production use.

    Usage:
        store = AffiliationRecordStoreStub(seed_demo_data=True)

        # Simulate the backend being down
        store.set_available(False)

        # Inspect what the workflow submitted
        assert store.submitted_new_records[0].email == "..."

    Attributes:
        _payloads: Wire payloads keyed by record id, in insertion order.
        _available: Availability toggle for failure injection.
        _submitted_new: Records received through submit_new_record.
        _submitted_updates: Records received through submit_updated_record.
        _decisions: (record_id, outcome, reason) per stored decision.
    """

    def __init__(self, seed_demo_data: bool = False) -> None:
        """Initialize the stub, optionally with the demo records.

        Args:
            seed_demo_data: Load one approved member (document number
                123.456.789-09) and two pending enrollments.
        """
        self._payloads: dict[str, dict[str, Any]] = {}
        self._available = True
        self._submitted_new: list[AffiliationRecord] = []
        self._submitted_updates: list[AffiliationRecord] = []
        self._decisions: list[tuple[str, ModerationStatus, str | None]] = []
        # Decisions are compare-and-set on the stored status
        self._decision_lock = asyncio.Lock()
        if seed_demo_data:
            self.seed_demo_data()

    # ========================================
    # AffiliationRecordStoreProtocol
    # ========================================

    async def lookup_by_document_number(
        self, document_number: str
    ) -> AffiliationRecord | None:
        """Find the most recently stored record with this document number."""
        self._check_available("lookup_by_document_number")
        wanted = normalize_document_number(document_number)
        for payload in reversed(list(self._payloads.values())):
            if normalize_document_number(payload.get("cpf")) == wanted:
                return AffiliationRecordDTO.from_payload(payload).to_record()
        return None

    async def submit_new_record(self, record: AffiliationRecord) -> SubmissionReceipt:
        """Store a new enrollment under a fresh time-ordered id, PENDING."""
        self._check_available("submit_new_record")
        record_id = str(uuid7())
        self._store(
            record.with_changes(
                record_id=record_id, moderation_status=ModerationStatus.PENDING
            )
        )
        self._submitted_new.append(record)
        return SubmissionReceipt(record_id=record_id, message=NEW_RECORD_MESSAGE)

    async def submit_updated_record(self, record: AffiliationRecord) -> SubmissionReceipt:
        """Queue an edited member record for review.

        The stored payload is replaced and goes back to PENDING. A record
        without an id gets a fresh one.
        """
        self._check_available("submit_updated_record")
        record_id = record.record_id or str(uuid7())
        self._store(
            record.with_changes(
                record_id=record_id, moderation_status=ModerationStatus.PENDING
            )
        )
        self._submitted_updates.append(record)
        return SubmissionReceipt(
            record_id=record_id,
            message=(
                "Dados validados com sucesso! Um e-mail de confirmação foi "
                f"enviado para {record.email}"
            ),
        )

    async def list_pending_records(self) -> list[AffiliationRecord]:
        """List PENDING records in insertion order."""
        self._check_available("list_pending_records")
        return [
            AffiliationRecordDTO.from_payload(payload).to_record()
            for payload in self._payloads.values()
            if payload.get("status") == ModerationStatus.PENDING.value
        ]

    async def decide_record(
        self,
        record_id: str,
        outcome: ModerationStatus,
        reason: str | None = None,
    ) -> bool:
        """Persist a decision, enforcing the moderation transition matrix.

        Raises:
            CollaboratorUnavailableError: If the stub is set unavailable.
            RecordAlreadyDecidedError: If the record is APPROVED/REJECTED.
            InvalidModerationTransitionError: If outcome is not a decision.
        """
        self._check_available("decide_record")
        async with self._decision_lock:
            payload = self._payloads.get(record_id)
            if payload is None:
                return False

            record = AffiliationRecordDTO.from_payload(payload).to_record()
            if record.moderation_status is not None and record.moderation_status.is_terminal():
                raise RecordAlreadyDecidedError(
                    record_id=record_id,
                    terminal_status=record.moderation_status,
                )
            self._store(record.with_moderation_status(outcome))
            self._decisions.append((record_id, outcome, reason))
        return True

    # ========================================
    # Test helpers
    # ========================================

    def seed_demo_data(self) -> None:
        """Load the demo member and the two demo pending enrollments."""
        for payload in _DEMO_PAYLOADS:
            self._payloads[payload["id"]] = dict(payload)

    def add_record(self, record: AffiliationRecord) -> None:
        """Store a record as-is (it must already carry an id)."""
        if record.record_id is None:
            raise ValueError("add_record requires a record with record_id set")
        self._store(record)

    def get(self, record_id: str) -> AffiliationRecord | None:
        payload = self._payloads.get(record_id)
        if payload is None:
            return None
        return AffiliationRecordDTO.from_payload(payload).to_record()

    def get_payload(self, record_id: str) -> dict[str, Any] | None:
        payload = self._payloads.get(record_id)
        return dict(payload) if payload is not None else None

    def set_available(self, available: bool) -> None:
        """Toggle availability; when False every operation raises."""
        self._available = available

    @property
    def submitted_new_records(self) -> list[AffiliationRecord]:
        return list(self._submitted_new)

    @property
    def submitted_updated_records(self) -> list[AffiliationRecord]:
        return list(self._submitted_updates)

    @property
    def decisions(self) -> list[tuple[str, ModerationStatus, str | None]]:
        return list(self._decisions)

    def clear(self) -> None:
        """Clear all stored data (for test cleanup)."""
        self._payloads.clear()
        self._submitted_new.clear()
        self._submitted_updates.clear()
        self._decisions.clear()
        self._available = True

    def _store(self, record: AffiliationRecord) -> None:
        payload = AffiliationRecordDTO.from_record(record).to_payload()
        self._payloads[payload["id"]] = payload

    def _check_available(self, operation: str) -> None:
        if not self._available:
            raise CollaboratorUnavailableError(
                collaborator="record_store",
                operation=operation,
                detail="store is unavailable",
            )
