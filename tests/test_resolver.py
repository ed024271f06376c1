"""Tests for template resolution end to end (builder + registry + substitution)."""

import time
from datetime import date
from decimal import Decimal

import pytest

from botpanel.core import PREVIEW_CLIENT_ID, Business, Client, Order, Promotion
from botpanel.database import StoreError
from botpanel.templates import (
    Category,
    ContextBuilder,
    TemplateResolver,
    VariableContext,
    get_registry,
    substitute,
)
from tests.conftest import (
    CLIENT_ID,
    FIXED_NOW,
    ORDER_ID,
    PROMOTION_ID,
    USER_ID,
    FakeStore,
)


def ctx(**ids) -> VariableContext:
    return VariableContext.from_ids(USER_ID, "whatsapp", **ids)


# =============================================================================
# SUBSTITUTION
# =============================================================================


class TestSubstitute:
    def test_replaces_every_occurrence(self):
        result = substitute("{nombre} y {nombre}", {"nombre": "Ana"})
        assert result == "Ana y Ana"

    def test_empty_value_keeps_placeholder(self):
        assert substitute("Hola {nombre}", {"nombre": ""}) == "Hola {nombre}"

    def test_unknown_name_keeps_placeholder(self):
        assert substitute("Hola {apodo}", {"nombre": "Ana"}) == "Hola {apodo}"

    def test_values_are_not_expanded_again(self):
        result = substitute("{a} {b}", {"a": "{b}", "b": "x"})
        assert result == "{b} x"

    def test_no_placeholders_is_identity(self):
        text = "Sin variables aquí: 100% {"
        assert substitute(text, {"nombre": "Ana"}) == text


# =============================================================================
# RESOLUTION
# =============================================================================


class TestResolveClient:
    def test_client_variables(self, resolver):
        template = "{nombre} | {email} | {telefono} | {instagram_usuario}"
        result = resolver.resolve(template, ctx(client_id=CLIENT_ID))
        assert result == "Ana Torres | ana@correo.com | +57 311 555 0101 | @anatorres"

    def test_loyalty_formatting(self, resolver):
        template = "{puntos} / {total_compras} / {ultima_compra}"
        result = resolver.resolve(template, ctx(client_id=CLIENT_ID))
        assert result == "250 puntos / $1,250.00 / 3 de septiembre de 2024"

    def test_client_without_purchases(self, store, resolver):
        store.clients["c-new"] = Client(id="c-new", name="Luis")
        result = resolver.resolve("{puntos} {total_compras} {ultima_compra}", ctx(client_id="c-new"))
        assert result == "0 puntos $0.00 Sin compras registradas"

    def test_empty_client_field_keeps_placeholder(self, store, resolver):
        store.clients["c-noemail"] = Client(id="c-noemail", name="Luis", email="")
        result = resolver.resolve("{nombre} <{email}>", ctx(client_id="c-noemail"))
        assert result == "Luis <{email}>"

    def test_global_replacement(self, resolver):
        result = resolver.resolve("{nombre}, {nombre}, {nombre}!", ctx(client_id=CLIENT_ID))
        assert result == "Ana Torres, Ana Torres, Ana Torres!"


class TestResolveOtherSources:
    def test_business_variables(self, resolver):
        template = "{nombre_negocio}: {descripcion_negocio} en {ubicacion} ({enlace_menu})"
        result = resolver.resolve(template, ctx())
        assert result == (
            "Café Aroma: Café de especialidad en Calle 10 #5-20 (https://cafearoma.co/menu)"
        )

    def test_business_missing_field_keeps_placeholder(self, store, resolver):
        store.businesses[USER_ID] = Business(user_id=USER_ID, business_name="Café Aroma")
        result = resolver.resolve("{nombre_negocio} {ubicacion}", ctx())
        assert result == "Café Aroma {ubicacion}"

    def test_promotion_variables(self, resolver):
        template = (
            "{nombre_promocion}: {descripcion_promocion}, del {fecha_inicio} al {fecha_fin}. "
            "{usos_actuales} de {usos_maximos}"
        )
        result = resolver.resolve(template, ctx(promotion_id=PROMOTION_ID))
        assert result == (
            "2x1 en capuchinos: Todos los martes, del 1 de noviembre de 2024 "
            "al 30 de noviembre de 2024. 45 personas de 100 personas"
        )

    def test_unlimited_promotion(self, store, resolver):
        store.promotions["p-open"] = Promotion(id="p-open", name="Abierta")
        result = resolver.resolve(
            "{usos_maximos} {usos_actuales} {fecha_fin}", ctx(promotion_id="p-open")
        )
        assert result == "Sin límite 0 personas {fecha_fin}"

    def test_order_variables(self, resolver):
        template = "Pedido {numero_pedido} ({total_pedido}) {estado_pedido}, llega el {fecha_entrega}"
        result = resolver.resolve(template, ctx(order_id=ORDER_ID))
        assert result == (
            "Pedido #1042 ($99.90) En preparación, llega el 15 de noviembre de 2024"
        )

    def test_datetime_variables(self, resolver):
        result = resolver.resolve("{dia_semana} {fecha_actual} {hora_actual}", ctx())
        assert result == "Lunes 28 de octubre de 2024 14:05"


class TestFallbacks:
    def test_no_placeholders_is_identity(self, store, resolver):
        text = "Gracias por visitarnos"
        assert resolver.resolve(text, ctx(client_id=CLIENT_ID)) == text
        assert store.calls == []

    def test_missing_context_id_keeps_placeholders(self, resolver):
        template = "Hola {nombre}, tenés {puntos} y tu pedido {numero_pedido} llega el {fecha_entrega}"
        result = resolver.resolve(template, ctx(client_id=CLIENT_ID))
        assert result == (
            "Hola Ana Torres, tenés 250 puntos y tu pedido {numero_pedido} llega el {fecha_entrega}"
        )

    def test_unknown_client_keeps_placeholders(self, resolver):
        result = resolver.resolve("Hola {nombre}", ctx(client_id="does-not-exist"))
        assert result == "Hola {nombre}"

    def test_unknown_variable_untouched(self, resolver):
        result = resolver.resolve("{nombre} {codigo_secreto}", ctx(client_id=CLIENT_ID))
        assert result == "Ana Torres {codigo_secreto}"

    def test_malformed_span_left_alone(self, resolver):
        result = resolver.resolve("Hola {nombre, bienvenida a {nombre_negocio}", ctx(client_id=CLIENT_ID))
        assert result == "Hola {nombre, bienvenida a Café Aroma"

    def test_unbalanced_only(self, resolver):
        assert resolver.resolve("Hola {nombre", ctx(client_id=CLIENT_ID)) == "Hola {nombre"

    def test_idempotent_on_resolved_output(self, resolver):
        first = resolver.resolve("Hola {nombre} de {nombre_negocio}", ctx(client_id=CLIENT_ID))
        assert resolver.resolve(first, ctx(client_id=CLIENT_ID)) == first

    def test_store_outage_degrades_to_placeholders(self, store, resolver):
        store.fail_with = {kind: StoreError("connection refused") for kind in ("client", "business")}
        template = "Hola {nombre}, te saluda {nombre_negocio}"
        assert resolver.resolve(template, ctx(client_id=CLIENT_ID)) == template

    def test_store_outage_keeps_datetime_variables(self, store, resolver):
        """Date/time needs no lookup, so it still resolves during an outage."""
        store.fail_with = {
            kind: StoreError("connection refused") for kind in ("client", "business", "order")
        }
        template = "Hola {nombre}, hoy es {dia_semana}"
        result = resolver.resolve(template, ctx(client_id=CLIENT_ID, order_id=ORDER_ID))
        assert result == "Hola {nombre}, hoy es Lunes"

    def test_store_outage_still_resolves_other_sources(self, store, resolver):
        store.fail_with = {"client": StoreError("timeout")}
        result = resolver.resolve("{nombre} - {nombre_negocio}", ctx(client_id=CLIENT_ID))
        assert result == "{nombre} - Café Aroma"

    def test_unexpected_error_returns_original(self, store, resolver):
        store.fail_with = {"order": RuntimeError("boom")}
        template = "Hola {nombre}, hoy es {dia_semana}, pedido {numero_pedido}"
        assert resolver.resolve(template, ctx(client_id=CLIENT_ID, order_id=ORDER_ID)) == template

    def test_extractor_error_returns_original(self, store, monkeypatch):
        registry = get_registry()

        def broken(category, ctx):
            raise ValueError("bad row")

        monkeypatch.setattr(registry, "extract_category", broken)
        builder = ContextBuilder(store, clock=lambda: FIXED_NOW)
        template = "{fecha_actual} {nombre}"
        assert TemplateResolver(store, context_builder=builder).resolve(template, ctx()) == template

    def test_slow_lookup_times_out(self, store):
        class SlowStore(FakeStore):
            def get_client(self, client_id):
                time.sleep(1.0)
                return super().get_client(client_id)

        slow = SlowStore(clients=store.clients, businesses=store.businesses)
        builder = ContextBuilder(slow, clock=lambda: FIXED_NOW, lookup_timeout=0.1)
        resolver = TemplateResolver(slow, context_builder=builder)
        result = resolver.resolve("{nombre} - {nombre_negocio}", ctx(client_id=CLIENT_ID))
        assert result == "{nombre} - Café Aroma"


class TestPreviewClient:
    def test_preview_uses_synthetic_client(self, store, resolver):
        template = "{nombre} {email} {telefono} {instagram_usuario} {puntos} {total_compras} {ultima_compra}"
        result = resolver.resolve(template, ctx(client_id=PREVIEW_CLIENT_ID))
        assert result == (
            "María González maria.gonzalez@email.com +57 300 123 4567 @mariagonzalez "
            "250 puntos $487.50 28 de octubre de 2024"
        )

    def test_preview_never_queries_client_table(self, store, resolver):
        resolver.resolve("{nombre}", ctx(client_id=PREVIEW_CLIENT_ID))
        assert all(kind != "client" for kind, _ in store.calls)


class TestMergeOrder:
    def test_later_category_wins(self, store, monkeypatch):
        """A name supplied by two categories takes the later category's value."""
        registry = get_registry()
        original = registry.extract_category

        def extract(category, ctx):
            values = original(category, ctx)
            if category in (Category.CLIENT, Category.ORDER):
                values["duplicado"] = category.value
            return values

        monkeypatch.setattr(registry, "extract_category", extract)
        builder = ContextBuilder(store, clock=lambda: FIXED_NOW)
        resolver = TemplateResolver(store, context_builder=builder)
        result = resolver.resolve("{duplicado}", ctx(client_id=CLIENT_ID, order_id=ORDER_ID))
        assert result == "order"


@pytest.mark.parametrize(
    "total, expected",
    [
        (Decimal("0"), "{total_pedido}"),
        (None, "{total_pedido}"),
        (Decimal("15000"), "$15,000.00"),
    ],
)
def test_order_total_rendering(store, resolver, total, expected):
    store.orders["o-x"] = Order(
        id="o-x", order_number="7", total_amount=total, estimated_delivery_date=date(2024, 1, 2)
    )
    assert resolver.resolve("{total_pedido}", ctx(order_id="o-x")) == expected


def test_resolve_convenience_function(store):
    from botpanel.templates import resolve

    result = resolve("{nombre} en {nombre_negocio}", ctx(client_id=CLIENT_ID), store)
    assert result == "Ana Torres en Café Aroma"
