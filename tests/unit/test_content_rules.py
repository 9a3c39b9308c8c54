import pytest

from banderas.db.schemas import (
    HistoricalImageCreate,
    HistoricalImageUpdate,
    LeadershipPeriodCreate,
    LeadershipPeriodUpdate,
    ShieldCreate,
    ShieldUpdate,
)
from banderas.errors import StorageError


def _stored_url(storage, key):
    storage.put_bytes(key, b"img")
    return storage.public_url(key)


def _shield(container, storage, title, **extra):
    return container.shields.create(
        ShieldCreate(
            title=title,
            description=f"Escudo {title}",
            image_url=_stored_url(storage, f"shields/{title}.png"),
            **extra,
        )
    )


def test_only_one_main_shield(container, storage):
    first = _shield(container, storage, "primero", is_main_shield=True)
    second = _shield(container, storage, "segundo", is_main_shield=True)

    assert container.shields.get_main().id == second.id
    assert container.shields.get_by_id(first.id).is_main_shield is False


def test_update_to_main_clears_others(container, storage):
    first = _shield(container, storage, "primero", is_main_shield=True)
    second = _shield(container, storage, "segundo")

    container.shields.update(second.id, ShieldUpdate(is_main_shield=True))

    assert container.shields.get_main().id == second.id
    assert container.shields.get_by_id(first.id).is_main_shield is False


def test_update_missing_shield_keeps_current_main(container, storage):
    first = _shield(container, storage, "primero", is_main_shield=True)

    assert container.shields.update("ghost", ShieldUpdate(is_main_shield=True)) is None
    assert container.shields.get_main().id == first.id


def test_set_main(container, storage):
    first = _shield(container, storage, "primero", is_main_shield=True)
    second = _shield(container, storage, "segundo")

    assert container.shields.set_main(second.id).is_main_shield is True
    assert container.shields.get_by_id(first.id).is_main_shield is False
    assert container.shields.set_main("ghost") is None


def test_get_main_none_when_unset(container, storage):
    _shield(container, storage, "primero")
    assert container.shields.get_main() is None


def test_shield_image_url_fills_storage_key(container, storage):
    shield = _shield(container, storage, "llave")
    assert shield.image_s3_key == "shields/llave.png"


def test_shield_rejects_foreign_image_url(container):
    with pytest.raises(StorageError):
        container.shields.create(
            ShieldCreate(title="x", description="y", image_url="https://evil.example/x.png")
        )


def test_leadership_image_url_validation(container, storage):
    period = container.leadership.create(LeadershipPeriodCreate(year="2024", jefatura="Ana Mora"))
    assert period.image_url is None

    with pytest.raises(StorageError):
        container.leadership.update(period.id, LeadershipPeriodUpdate(image_url="ftp://nope/x.jpg"))

    url = _stored_url(storage, "leadership/2024.jpg")
    updated = container.leadership.update(period.id, LeadershipPeriodUpdate(image_url=url, segunda_voz="Luis"))
    assert updated.image_s3_key == "leadership/2024.jpg"
    assert updated.segunda_voz == "Luis"


def test_historical_image_key_change_deletes_old_object(container, storage):
    old_url = _stored_url(storage, "history/old.jpg")
    image = container.historical_images.create(
        HistoricalImageCreate(title="1951", description="Primera formación", image_url=old_url, image_s3_key="history/old.jpg")
    )
    new_url = _stored_url(storage, "history/new.jpg")

    container.historical_images.update(
        image.id, HistoricalImageUpdate(image_url=new_url, image_s3_key="history/new.jpg")
    )

    assert not storage.exists("history/old.jpg")
    assert storage.exists("history/new.jpg")


def test_historical_image_update_without_key_keeps_object(container, storage):
    url = _stored_url(storage, "history/keep.jpg")
    image = container.historical_images.create(
        HistoricalImageCreate(title="1960", description="Desfile", image_url=url, image_s3_key="history/keep.jpg")
    )

    container.historical_images.update(image.id, HistoricalImageUpdate(title="1961"))

    assert storage.exists("history/keep.jpg")


def test_historical_image_delete_removes_object(container, storage):
    url = _stored_url(storage, "history/gone.jpg")
    image = container.historical_images.create(
        HistoricalImageCreate(title="1970", description="Gira", image_url=url, image_s3_key="history/gone.jpg")
    )

    assert container.historical_images.delete(image.id) is True
    assert not storage.exists("history/gone.jpg")
    assert container.historical_images.delete(image.id) is False
