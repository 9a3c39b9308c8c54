from banderas.db.schemas import (
    HistoricalMilestoneCreate,
    ReorderItem,
    ShieldValueCreate,
    ShieldValueUpdate,
)


def test_create_then_get_returns_same_row(container):
    created = container.shield_values.create(ShieldValueCreate(title="Honor", description="Servir con rectitud"))
    fetched = container.shield_values.get_by_id(created.id)

    assert fetched is not None
    assert fetched.id == created.id
    assert fetched.title == "Honor"
    assert fetched.description == "Servir con rectitud"
    assert fetched.icon_name == "Award"
    assert fetched.display_order == 0


def test_get_by_id_unknown_returns_none(container):
    assert container.history.get_by_id("does-not-exist") is None


def test_delete_returns_true_once_then_false(container):
    created = container.history.create(
        HistoricalMilestoneCreate(year="1951", title="Fundación", description="Nace el Cuerpo de Banderas")
    )
    assert created.icon_name == "Flag"
    assert container.history.delete(created.id) is True
    assert container.history.delete(created.id) is False


def test_update_is_partial(container):
    created = container.shield_values.create(
        ShieldValueCreate(title="Disciplina", description="Constancia", icon_name="Shield")
    )
    updated = container.shield_values.update(created.id, ShieldValueUpdate(description="Constancia diaria"))

    assert updated.title == "Disciplina"
    assert updated.icon_name == "Shield"
    assert updated.description == "Constancia diaria"


def test_update_unknown_returns_none(container):
    assert container.shield_values.update("missing", ShieldValueUpdate(title="X")) is None


def test_reorder_changes_listing_order(container):
    a = container.shield_values.create(ShieldValueCreate(title="A", description="a", display_order=1))
    b = container.shield_values.create(ShieldValueCreate(title="B", description="b", display_order=2))

    container.shield_values.reorder([
        ReorderItem(id=a.id, display_order=2),
        ReorderItem(id=b.id, display_order=1),
    ])

    titles = [row.title for row in container.shield_values.get_all()]
    assert titles == ["B", "A"]


def test_reorder_skips_unknown_ids(container):
    a = container.shield_values.create(ShieldValueCreate(title="A", description="a"))

    container.shield_values.reorder([
        ReorderItem(id="ghost", display_order=5),
        ReorderItem(id=a.id, display_order=3),
    ])

    assert container.shield_values.get_by_id(a.id).display_order == 3
    assert len(container.shield_values.get_all()) == 1
