"""
Comparison Center - Object Usecase Tests

Tests for:
- Object creation with associations
- Association sync on update (update existing, add new, keep absent)
- Immutable fields on update and photo path changes
- Association fan-out on reads
"""
from datetime import datetime, timezone

import pytest

from comparison_center.core.errors import AlreadyExistsError, NotFoundError, ValidationError
from comparison_center.features.objects.domain import Association, Object, new_object_filter
from comparison_center.features.objects.usecase import ObjectUsecase
from tests.fakes import FakeAssociationRepository, FakeObjectRepository, SequentialIdGenerator


def make_object(**overrides) -> Object:
    fields = dict(name="Laptop", rating=7, comparison_id="cmp-1", advs="light", disadvs="pricey")
    fields.update(overrides)
    return Object(**fields)


async def stored_object(object_repo, **overrides) -> Object:
    obj = make_object(
        id="obj-1",
        created_at=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        photo_path="/photos/a.png",
        **overrides,
    )
    await object_repo.create(obj)
    object_repo.calls.clear()
    return obj


class TestCreateObject:
    """Test object creation"""

    @pytest.mark.asyncio
    async def test_returns_generated_id(self, object_usecase, object_repo):
        """Test the new id is returned and the record stored"""
        before = datetime.now(timezone.utc)
        object_id = await object_usecase.create_object(make_object())

        assert object_id == "id-1"
        stored = object_repo.items["id-1"]
        assert stored.name == "Laptop"
        assert before <= stored.created_at <= datetime.now(timezone.utc)

    @pytest.mark.asyncio
    async def test_adds_each_association_with_object_id(self, object_usecase, association_repo):
        """Test every input association is added in order, stamped with the new id"""
        obj = make_object(associations=[
            Association(custom_option_id="opt-a", value="1 kg"),
            Association(custom_option_id="opt-b", value="$999", object_id="stale"),
        ])

        object_id = await object_usecase.create_object(obj)

        assert association_repo.calls == [
            ("add", Association(custom_option_id="opt-a", value="1 kg", object_id=object_id)),
            ("add", Association(custom_option_id="opt-b", value="$999", object_id=object_id)),
        ]

    @pytest.mark.asyncio
    async def test_without_associations(self, object_usecase, association_repo):
        """Test no association calls happen for an empty list"""
        await object_usecase.create_object(make_object())
        assert association_repo.calls == []

    @pytest.mark.asyncio
    async def test_missing_comparison(self, association_repo):
        """Test an unknown comparison is NotFound and nothing is added"""
        usecase = ObjectUsecase(FakeObjectRepository(comparison_ids={"cmp-1"}), association_repo, SequentialIdGenerator())

        with pytest.raises(NotFoundError) as exc_info:
            await usecase.create_object(make_object(
                comparison_id="cmp-404",
                associations=[Association(custom_option_id="opt-a", value="x")],
            ))
        assert exc_info.value.message.startswith("failed to create object - ")
        assert association_repo.calls == []

    @pytest.mark.asyncio
    async def test_failed_association_keeps_object(self, object_usecase, object_repo, association_repo):
        """Test a repeated custom option fails after the object is already stored"""
        obj = make_object(associations=[
            Association(custom_option_id="opt-a", value="first"),
            Association(custom_option_id="opt-a", value="second"),
        ])

        with pytest.raises(AlreadyExistsError) as exc_info:
            await object_usecase.create_object(obj)

        assert exc_info.value.message.startswith("failed to add object custom option - ")
        assert "id-1" in object_repo.items
        assert association_repo.items[("id-1", "opt-a")].value == "first"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("overrides", [
        {"name": ""},
        {"name": "x" * 51},
        {"rating": 0},
        {"rating": 11},
        {"advs": "x" * 3001},
        {"disadvs": "x" * 3001},
        {"comparison_id": ""},
        {"associations": [Association(custom_option_id="opt-a", value="")]},
        {"associations": [Association(custom_option_id="opt-a", value="x" * 101)]},
        {"associations": [Association(custom_option_id="", value="x")]},
    ])
    async def test_invalid_fields(self, object_usecase, object_repo, association_repo, overrides):
        """Test out-of-bounds fields fail before any write"""
        with pytest.raises(ValidationError):
            await object_usecase.create_object(make_object(**overrides))
        assert object_repo.calls == []
        assert association_repo.calls == []

    @pytest.mark.asyncio
    async def test_empty_advs_allowed(self, object_usecase):
        """Test empty advantages and disadvantages are valid"""
        object_id = await object_usecase.create_object(make_object(advs="", disadvs=""))
        assert object_id == "id-1"


class TestUpdateObject:
    """Test object updates and association sync"""

    @pytest.mark.asyncio
    async def test_updates_existing_and_adds_new(self, object_usecase, object_repo, association_repo):
        """Test a known custom option is updated and an unknown one added"""
        await stored_object(object_repo)
        association_repo.seed(Association(custom_option_id="opt-a", value="old", object_id="obj-1"))

        await object_usecase.update_object("obj-1", make_object(associations=[
            Association(custom_option_id="opt-a", value="new"),
            Association(custom_option_id="opt-b", value="added"),
        ]))

        assert association_repo.calls == [
            ("update", Association(custom_option_id="opt-a", value="new", object_id="obj-1")),
            ("add", Association(custom_option_id="opt-b", value="added", object_id="obj-1")),
        ]
        assert association_repo.lookups == ["obj-1"]

    @pytest.mark.asyncio
    async def test_absent_associations_are_kept(self, object_usecase, object_repo, association_repo):
        """Test associations missing from the input stay stored"""
        await stored_object(object_repo)
        association_repo.seed(
            Association(custom_option_id="opt-a", value="a", object_id="obj-1"),
            Association(custom_option_id="opt-c", value="c", object_id="obj-1"),
        )

        await object_usecase.update_object("obj-1", make_object(associations=[
            Association(custom_option_id="opt-a", value="a2"),
        ]))

        assert association_repo.items[("obj-1", "opt-c")].value == "c"
        assert association_repo.items[("obj-1", "opt-a")].value == "a2"

    @pytest.mark.asyncio
    async def test_repeated_existing_option_last_value_wins(self, object_usecase, object_repo, association_repo):
        """Test repeated entries for a stored option are each written in order"""
        await stored_object(object_repo)
        association_repo.seed(Association(custom_option_id="opt-a", value="old", object_id="obj-1"))

        await object_usecase.update_object("obj-1", make_object(associations=[
            Association(custom_option_id="opt-a", value="first"),
            Association(custom_option_id="opt-a", value="second"),
        ]))

        assert [call[0] for call in association_repo.calls] == ["update", "update"]
        assert association_repo.items[("obj-1", "opt-a")].value == "second"

    @pytest.mark.asyncio
    async def test_immutable_fields_come_from_storage(self, object_usecase, object_repo):
        """Test id, created_at, comparison_id and photo_path cannot be changed"""
        original = await stored_object(object_repo)

        await object_usecase.update_object("obj-1", make_object(
            id="other",
            name="Renamed",
            rating=3,
            comparison_id="cmp-2",
            photo_path="/photos/evil.png",
            created_at=datetime(2000, 1, 1, tzinfo=timezone.utc),
        ))

        stored = object_repo.items["obj-1"]
        assert stored.name == "Renamed"
        assert stored.rating == 3
        assert stored.created_at == original.created_at
        assert stored.comparison_id == "cmp-1"
        assert stored.photo_path == "/photos/a.png"
        assert "other" not in object_repo.items

    @pytest.mark.asyncio
    async def test_missing_object(self, object_usecase, object_repo, association_repo):
        """Test an unknown id is NotFound and nothing is written"""
        with pytest.raises(NotFoundError) as exc_info:
            await object_usecase.update_object("nope", make_object())

        assert exc_info.value.message.startswith("failed to get existing object - ")
        assert object_repo.calls == []
        assert association_repo.calls == []
        assert association_repo.lookups == []

    @pytest.mark.asyncio
    async def test_invalid_update(self, object_usecase, object_repo, association_repo):
        """Test validation runs after the existing record is loaded"""
        await stored_object(object_repo)

        with pytest.raises(ValidationError):
            await object_usecase.update_object("obj-1", make_object(rating=42))
        assert object_repo.calls == []
        assert association_repo.calls == []


class TestReadObject:
    """Test object lookup and listing"""

    @pytest.mark.asyncio
    async def test_get_attaches_associations(self, object_usecase, object_repo, association_repo):
        """Test the stored associations come back with the object"""
        await stored_object(object_repo)
        association_repo.seed(
            Association(custom_option_id="opt-a", value="a", object_id="obj-1"),
            Association(custom_option_id="opt-b", value="b", object_id="obj-1"),
            Association(custom_option_id="opt-a", value="other", object_id="obj-2"),
        )

        obj = await object_usecase.get_object("obj-1")

        assert [(a.custom_option_id, a.value) for a in obj.associations] == [("opt-a", "a"), ("opt-b", "b")]

    @pytest.mark.asyncio
    async def test_get_missing(self, object_usecase):
        """Test an unknown id is NotFound"""
        with pytest.raises(NotFoundError) as exc_info:
            await object_usecase.get_object("nope")
        assert exc_info.value.message.startswith("failed to get object - ")

    @pytest.mark.asyncio
    async def test_list_looks_up_associations_per_object(self, object_usecase, association_repo):
        """Test each listed object gets its own association lookup"""
        first = await object_usecase.create_object(make_object(
            name="A", rating=5, associations=[Association(custom_option_id="opt-a", value="a")],
        ))
        second = await object_usecase.create_object(make_object(name="B", rating=9))

        objects = await object_usecase.list_objects(new_object_filter(order_by="rating"))

        assert [o.id for o in objects] == [first, second]
        assert association_repo.lookups == [first, second]
        assert objects[0].associations[0].value == "a"
        assert objects[1].associations == []


class TestDeleteAndPhoto:
    """Test deletion and photo path updates"""

    @pytest.mark.asyncio
    async def test_delete_missing(self, object_usecase):
        """Test deleting an unknown id is NotFound"""
        with pytest.raises(NotFoundError) as exc_info:
            await object_usecase.delete_object("nope")
        assert exc_info.value.message.startswith("failed to delete object - ")

    @pytest.mark.asyncio
    async def test_set_photo_path_changes_only_photo(self, object_usecase, object_repo):
        """Test only photo_path differs after a photo update"""
        original = await stored_object(object_repo)

        await object_usecase.set_photo_path("obj-1", "/photos/b.jpg")

        stored = object_repo.items["obj-1"]
        assert stored.photo_path == "/photos/b.jpg"
        assert stored.name == original.name
        assert stored.created_at == original.created_at
        assert stored.comparison_id == original.comparison_id

    @pytest.mark.asyncio
    async def test_set_photo_path_missing(self, object_usecase):
        """Test setting a photo on an unknown object is NotFound"""
        with pytest.raises(NotFoundError):
            await object_usecase.set_photo_path("nope", "/photos/b.jpg")
