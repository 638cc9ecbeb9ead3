"""
Tests for CrudController orchestration.

The controller is exercised against an in-memory service double so that each
branch (entity rejected, service rejected, not found, id mismatch) can be
checked together with the exact service calls it makes.
"""

import asyncio
import uuid

import pytest

from rest_api.mappers import CustomerMapper
from rest_api.models import Customer
from rest_api.routers._common import (
    CrudController,
    NotFound,
    PreconditionFailed,
    Success,
    ValidationFailed,
)
from rest_api.routers.customers import order_customers
from rest_api.routers.schemas import CustomerCreate, CustomerOutput, IdOutput
from shared.domain import Email, Notification


def make_customer(name, email, id=None):
    return Customer(name=name, email=Email(email), id=id)


def reverse_by_name(view_models):
    return sorted(view_models, key=lambda vm: vm.name, reverse=True)


@pytest.fixture
def customers():
    return [
        make_customer("Ana", "ana@example.com"),
        make_customer("Carla", "carla@example.com"),
        make_customer("Bruno", "bruno@example.com"),
    ]


def build_controller(service, order=order_customers):
    return CrudController(service=service, mapper=CustomerMapper(), order=order)


class TestQueries:

    def test_list_all_is_ordered_by_injected_function(self, fake_service, customers):
        controller = build_controller(fake_service(customers), order=reverse_by_name)

        result = controller.list_all()

        assert isinstance(result, Success)
        assert [vm.name for vm in result.value] == ["Carla", "Bruno", "Ana"]
        assert all(isinstance(vm, CustomerOutput) for vm in result.value)

    def test_order_is_called_once_per_query(self, fake_service, customers):
        calls = []

        def tracking_order(view_models):
            calls.append(len(view_models))
            return list(view_models)

        controller = build_controller(fake_service(customers), order=tracking_order)
        controller.list_all()
        controller.search("a")

        assert calls == [3, 3]

    def test_list_all_on_empty_store(self, fake_service):
        result = build_controller(fake_service()).list_all()

        assert result == Success([])

    def test_search_uses_service_results(self, fake_service, customers):
        service = fake_service(customers, search_results=customers[:1])

        result = build_controller(service).search("ana")

        assert [vm.name for vm in result.value] == ["Ana"]
        assert service.calls == ["search"]

    @pytest.mark.asyncio
    async def test_get_by_id_found(self, fake_service, customers):
        target = customers[1]

        result = await build_controller(fake_service(customers)).get_by_id(target.id)

        assert isinstance(result, Success)
        assert result.value.id == target.id
        assert result.value.email == "carla@example.com"

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, fake_service, customers):
        result = await build_controller(fake_service(customers)).get_by_id(uuid.uuid4())

        assert isinstance(result, NotFound)
        assert result.status_code == 404
        assert result.notifications == (Notification("id", "record not found"),)


class TestCreate:

    @pytest.mark.asyncio
    async def test_create_commits_once_and_returns_id(self, fake_service):
        service = fake_service()
        controller = build_controller(service)

        result = await controller.create(CustomerCreate(name="Ana", email="ana@example.com"))

        assert isinstance(result, Success)
        assert isinstance(result.value, IdOutput)
        assert service.calls == ["add", "commit"]
        assert service.committed == 1
        assert result.value.id in service.records

    @pytest.mark.asyncio
    async def test_create_keeps_client_supplied_id(self, fake_service):
        client_id = uuid.uuid4()
        service = fake_service()

        result = await build_controller(service).create(
            CustomerCreate(id=client_id, name="Ana", email="ana@example.com")
        )

        assert result.value.id == client_id

    @pytest.mark.asyncio
    async def test_invalid_entity_never_reaches_service(self, fake_service):
        service = fake_service()

        result = await build_controller(service).create(CustomerCreate(name="", email="bad"))

        assert isinstance(result, ValidationFailed)
        assert result.status_code == 400
        assert [n.property for n in result.notifications] == ["name", "email"]
        assert service.calls == []
        assert service.committed == 0

    @pytest.mark.asyncio
    async def test_service_rejection_is_not_committed(self, fake_service):
        service = fake_service(reject={"add": ("email", "email already registered")})

        result = await build_controller(service).create(
            CustomerCreate(name="Ana", email="ana@example.com")
        )

        assert isinstance(result, ValidationFailed)
        assert result.notifications == (Notification("email", "email already registered"),)
        assert service.calls == ["add"]
        assert service.records == {}


class TestUpdate:

    @pytest.mark.asyncio
    async def test_update_commits_once(self, fake_service, customers):
        target = customers[0]
        service = fake_service(customers)

        result = await build_controller(service).update(
            target.id, CustomerCreate(id=target.id, name="Ana Maria", email="ana@example.com")
        )

        assert result == Success()
        assert service.calls == ["update", "commit"]
        assert service.records[target.id].name == "Ana Maria"

    @pytest.mark.asyncio
    async def test_id_mismatch_makes_no_service_calls(self, fake_service, customers):
        service = fake_service(customers)

        result = await build_controller(service).update(
            customers[0].id,
            CustomerCreate(id=customers[1].id, name="Ana", email="ana@example.com"),
        )

        assert isinstance(result, PreconditionFailed)
        assert result.status_code == 400
        assert result.notifications == (Notification("id", "ids do not match"),)
        assert service.calls == []

    @pytest.mark.asyncio
    async def test_missing_body_id_is_a_mismatch(self, fake_service, customers):
        service = fake_service(customers)

        result = await build_controller(service).update(
            customers[0].id, CustomerCreate(name="Ana", email="ana@example.com")
        )

        assert isinstance(result, PreconditionFailed)
        assert service.calls == []

    @pytest.mark.asyncio
    async def test_service_rejection(self, fake_service, customers):
        target = customers[0]
        service = fake_service(customers, reject={"update": ("id", "record not found")})

        result = await build_controller(service).update(
            target.id, CustomerCreate(id=target.id, name="Ana", email="ana@example.com")
        )

        assert isinstance(result, ValidationFailed)
        assert not isinstance(result, PreconditionFailed)
        assert service.committed == 0


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete_existing(self, fake_service, customers):
        target = customers[2]
        service = fake_service(customers)

        result = await build_controller(service).delete(target.id)

        assert result == Success()
        assert service.calls == ["get_by_id", "delete", "commit"]
        assert target.id not in service.records

    @pytest.mark.asyncio
    async def test_delete_missing_is_not_found(self, fake_service, customers):
        service = fake_service(customers)

        result = await build_controller(service).delete(uuid.uuid4())

        assert isinstance(result, NotFound)
        assert service.calls == ["get_by_id"]

    @pytest.mark.asyncio
    async def test_delete_rejected_by_service(self, fake_service, customers):
        service = fake_service(customers, reject={"delete": ("id", "in use")})

        result = await build_controller(service).delete(customers[0].id)

        assert isinstance(result, ValidationFailed)
        assert result.notifications == (Notification("id", "in use"),)
        assert service.committed == 0
        assert len(service.records) == 3


class TestFaults:

    @pytest.mark.asyncio
    async def test_unexpected_service_errors_propagate(self, fake_service):
        class BrokenService(fake_service):
            async def add(self, entity):
                raise RuntimeError("storage offline")

        with pytest.raises(RuntimeError, match="storage offline"):
            await build_controller(BrokenService()).create(
                CustomerCreate(name="Ana", email="ana@example.com")
            )

    @pytest.mark.asyncio
    async def test_cancelled_lookup_propagates_from_delete(self, fake_service, customers):
        class CancelledLookup(fake_service):
            async def get_by_id(self, entity_id):
                raise asyncio.CancelledError()

        service = CancelledLookup(customers)

        with pytest.raises(asyncio.CancelledError):
            await build_controller(service).delete(customers[0].id)

        assert service.calls == []
        assert service.committed == 0
        assert len(service.records) == 3

    @pytest.mark.asyncio
    async def test_cancelled_add_is_not_committed(self, fake_service):
        class CancelledAdd(fake_service):
            async def add(self, entity):
                self.calls.append("add")
                raise asyncio.CancelledError()

        service = CancelledAdd()

        with pytest.raises(asyncio.CancelledError):
            await build_controller(service).create(
                CustomerCreate(name="Ana", email="ana@example.com")
            )

        assert service.calls == ["add"]
        assert service.committed == 0

    @pytest.mark.asyncio
    async def test_cancelled_commit_propagates_without_retry(self, fake_service):
        class CancelledCommit(fake_service):
            async def commit(self):
                self.calls.append("commit")
                raise asyncio.CancelledError()

        service = CancelledCommit()

        with pytest.raises(asyncio.CancelledError):
            await build_controller(service).create(
                CustomerCreate(name="Ana", email="ana@example.com")
            )

        assert service.calls == ["add", "commit"]
        assert service.records == {}

    def test_mapper_errors_propagate(self, fake_service, customers):
        class BrokenMapper(CustomerMapper):
            def to_view_models(self, entities):
                raise ValueError("cannot map")

        controller = CrudController(
            service=fake_service(customers), mapper=BrokenMapper(), order=order_customers
        )

        with pytest.raises(ValueError, match="cannot map"):
            controller.list_all()
