"""Testes para montagem de componentes (template, carrossel, catálogo)."""

from __future__ import annotations

import pytest

from api.payload_builders.whatsapp.carousel import (
    build_carousel_components,
    build_product_carousel_components,
)
from api.payload_builders.whatsapp.catalog import build_catalog_components
from api.payload_builders.whatsapp.factory import build_full_payload
from api.payload_builders.whatsapp.parameters import serialize_body, serialize_parameter
from api.payload_builders.whatsapp.template import (
    TemplatePayloadBuilder,
    assemble_components,
    build_template_components,
)
from app.domain.media import MediaById, MediaByUrl
from app.domain.messages import TemplateMessage
from app.domain.template_components import (
    CarouselCard,
    CarouselComponents,
    CarouselQuickReply,
    CarouselUrlButton,
    CatalogComponents,
    ProductCard,
    ProductCarouselComponents,
    QuickReplyButton,
    TemplateComponents,
)
from app.domain.template_parameters import (
    CurrencyParameter,
    DateTimeParameter,
    DocumentParameter,
    ImageParameter,
    TextParameter,
    VideoParameter,
)


def _card(header=None, card_index=None) -> CarouselCard:
    return CarouselCard(
        header=header or ImageParameter(MediaByUrl(link="https://example.com/1.jpg")),
        buttons=[CarouselQuickReply(index=0, payload="buy")],
        card_index=card_index,
    )


class TestSerializeParameter:
    """Testes para serialize_parameter."""

    def test_text(self) -> None:
        assert serialize_parameter(TextParameter("Ana")) == {"type": "text", "text": "Ana"}

    def test_image_uses_media_resolver(self) -> None:
        """Imagem por id mantém `id` fora do carrossel."""
        assert serialize_parameter(ImageParameter(MediaById(id="m1"))) == {
            "type": "image",
            "image": {"id": "m1"},
        }

    def test_document_with_filename(self) -> None:
        parameter = DocumentParameter(MediaByUrl(link="https://x/doc.pdf"), filename="nota.pdf")
        assert serialize_parameter(parameter) == {
            "type": "document",
            "document": {"link": "https://x/doc.pdf", "filename": "nota.pdf"},
        }

    def test_currency(self) -> None:
        """Moeda no formato aninhado da Graph API."""
        parameter = CurrencyParameter(fallback_value="R$10,00", code="BRL", amount_1000=10000)
        assert serialize_parameter(parameter) == {
            "type": "currency",
            "currency": {"fallback_value": "R$10,00", "code": "BRL", "amount_1000": 10000},
        }

    def test_date_time(self) -> None:
        assert serialize_parameter(DateTimeParameter("1 de jan")) == {
            "type": "date_time",
            "date_time": {"fallback_value": "1 de jan"},
        }

    def test_body_wraps_strings(self) -> None:
        """Strings no body viram parâmetros de texto."""
        assert serialize_body(["a", TextParameter("b")]) == [
            {"type": "text", "text": "a"},
            {"type": "text", "text": "b"},
        ]


class TestBuildTemplateComponents:
    """Testes para build_template_components."""

    def test_single_text_body(self) -> None:
        """Só body com um texto: nenhum header ou botão."""
        components = TemplateComponents(body=[TextParameter("Ana")])
        assert build_template_components(components) == [
            {"type": "body", "parameters": [{"type": "text", "text": "Ana"}]}
        ]

    def test_idempotent(self) -> None:
        """Mesma entrada produz saída estruturalmente idêntica."""
        components = TemplateComponents(
            header=TextParameter("Olá"),
            body=[TextParameter("x")],
            quick_replies=[QuickReplyButton(index=0, payload="p")],
        )
        assert build_template_components(components) == build_template_components(components)

    def test_fixed_order_header_body_buttons(self) -> None:
        """Ordem: header, body, quick replies com índice preservado."""
        components = TemplateComponents(
            header=ImageParameter(MediaByUrl(link="https://x/h.png")),
            body=[TextParameter("x")],
            quick_replies=[
                QuickReplyButton(index=2, payload="later"),
                QuickReplyButton(index=0, payload="now"),
            ],
        )
        result = build_template_components(components)

        assert [item["type"] for item in result] == ["header", "body", "button", "button"]
        assert result[0]["parameters"] == [
            {"type": "image", "image": {"link": "https://x/h.png"}}
        ]
        assert [item["index"] for item in result[2:]] == [2, 0]
        assert result[2] == {
            "type": "button",
            "sub_type": "quick_reply",
            "index": 2,
            "parameters": [{"type": "payload", "payload": "later"}],
        }

    def test_duplicate_indices_accepted(self) -> None:
        """Índices repetidos são enviados como vieram."""
        components = TemplateComponents(
            quick_replies=[
                QuickReplyButton(index=1, payload="a"),
                QuickReplyButton(index=1, payload="b"),
            ]
        )
        assert [item["index"] for item in build_template_components(components)] == [1, 1]

    @pytest.mark.parametrize("components", [None, TemplateComponents(), TemplateComponents(body=[])])
    def test_empty_returns_none(self, components: TemplateComponents | None) -> None:
        """Sem componentes retorna None (nunca lista vazia)."""
        assert build_template_components(components) is None

    def test_empty_components_key_omitted(self) -> None:
        """Template com componentes vazios não emite a chave."""
        message = TemplateMessage(
            to="1", name="hello_world", language="en_US", components=TemplateComponents()
        )
        assert "components" not in TemplatePayloadBuilder().build(message)["template"]

    def test_quick_reply_multiple_payloads(self) -> None:
        """Sequência de payloads vira um parâmetro por item, em ordem."""
        components = TemplateComponents(
            quick_replies=[QuickReplyButton(index=0, payload=["sim", "pedido-42"])]
        )
        assert build_template_components(components) == [
            {
                "type": "button",
                "sub_type": "quick_reply",
                "index": 0,
                "parameters": [
                    {"type": "payload", "payload": "sim"},
                    {"type": "payload", "payload": "pedido-42"},
                ],
            }
        ]

    def test_quick_reply_empty_payloads_rejected(self) -> None:
        with pytest.raises(ValueError):
            QuickReplyButton(index=0, payload=[])

    def test_quick_reply_index_range(self) -> None:
        """Índice fora de 0..2 é rejeitado."""
        with pytest.raises(ValueError):
            QuickReplyButton(index=3, payload="x")

    def test_too_many_quick_replies(self) -> None:
        replies = [QuickReplyButton(index=i % 3, payload=str(i)) for i in range(4)]
        with pytest.raises(ValueError):
            TemplateComponents(quick_replies=replies)


class TestCarouselComponents:
    """Testes para build_carousel_components."""

    def test_card_index_follows_position(self) -> None:
        """card_index informado é ignorado; vale a posição."""
        components = CarouselComponents(cards=[_card(card_index=7), _card(card_index=3), _card()])
        carousel = build_carousel_components(components)[-1]
        assert [card["card_index"] for card in carousel["cards"]] == [0, 1, 2]

    def test_body_then_carousel(self) -> None:
        """Body opcional seguido de um único componente carousel."""
        components = CarouselComponents(cards=[_card()], body=["Ofertas"])
        result = build_carousel_components(components)
        assert [item["type"] for item in result] == ["body", "carousel"]
        assert result[0] == {"type": "body", "parameters": [{"type": "text", "text": "Ofertas"}]}

    def test_without_body(self) -> None:
        result = build_carousel_components(CarouselComponents(cards=[_card()]))
        assert [item["type"] for item in result] == ["carousel"]

    def test_header_by_id_rewritten_as_link(self) -> None:
        """Header de card por id sai como `link`."""
        card = _card(header=VideoParameter(MediaById(id="vid_1")))
        header = build_carousel_components(CarouselComponents(cards=[card]))[0]["cards"][0][
            "components"
        ][0]
        assert header == {
            "type": "header",
            "parameters": [{"type": "video", "video": {"link": "vid_1"}}],
        }

    def test_card_components_order_and_buttons(self) -> None:
        """Header, body e botões; índices de botão preservados."""
        card = CarouselCard(
            header=ImageParameter(MediaByUrl(link="https://x/p.jpg")),
            body=[TextParameter("Tênis"), "R$ 99"],
            buttons=[
                CarouselUrlButton(index=1, text="produto/42"),
                CarouselQuickReply(index=0, payload="quero"),
            ],
        )
        components = build_carousel_components(CarouselComponents(cards=[card]))[0]["cards"][0][
            "components"
        ]

        assert [item["type"] for item in components] == ["header", "body", "button", "button"]
        assert components[2] == {
            "type": "button",
            "sub_type": "url",
            "index": 1,
            "parameters": [{"type": "text", "text": "produto/42"}],
        }
        assert components[3] == {
            "type": "button",
            "sub_type": "quick_reply",
            "index": 0,
            "parameters": [{"type": "payload", "payload": "quero"}],
        }

    def test_card_button_limits(self) -> None:
        """Card exige 1 ou 2 botões."""
        header = ImageParameter(MediaByUrl(link="https://x/p.jpg"))
        with pytest.raises(ValueError):
            CarouselCard(header=header, buttons=[])
        with pytest.raises(ValueError):
            CarouselCard(
                header=header,
                buttons=[CarouselQuickReply(index=i, payload="p") for i in range(3)],
            )

    def test_card_count_limits(self) -> None:
        with pytest.raises(ValueError):
            CarouselComponents(cards=[])
        with pytest.raises(ValueError):
            CarouselComponents(cards=[_card() for _ in range(11)])


class TestProductCarouselComponents:
    """Testes para build_product_carousel_components."""

    def test_product_cards(self) -> None:
        """Cada card tem um único header com parâmetro product."""
        components = ProductCarouselComponents(
            cards=[
                ProductCard(product_retailer_id="sku-1", catalog_id="cat", card_index=5),
                ProductCard(product_retailer_id="sku-2", catalog_id="cat"),
            ],
            body=["Confira"],
        )
        result = build_product_carousel_components(components)

        assert result[0]["type"] == "body"
        cards = result[1]["cards"]
        assert [card["card_index"] for card in cards] == [0, 1]
        assert cards[1] == {
            "card_index": 1,
            "components": [
                {
                    "type": "header",
                    "parameters": [
                        {
                            "type": "product",
                            "product": {"product_retailer_id": "sku-2", "catalog_id": "cat"},
                        }
                    ],
                }
            ],
        }


class TestCatalogComponents:
    """Testes para build_catalog_components."""

    def test_body_and_catalog_button(self) -> None:
        components = CatalogComponents(thumbnail_product_retailer_id="sku-9", body=["10%"])
        assert build_catalog_components(components) == [
            {"type": "body", "parameters": [{"type": "text", "text": "10%"}]},
            {
                "type": "button",
                "sub_type": "CATALOG",
                "index": 0,
                "parameters": [
                    {"type": "action", "action": {"thumbnail_product_retailer_id": "sku-9"}}
                ],
            },
        ]

    def test_without_body(self) -> None:
        result = build_catalog_components(CatalogComponents(thumbnail_product_retailer_id="s"))
        assert [item["type"] for item in result] == ["button"]


class TestAssembleComponents:
    """Testes para assemble_components e template completo."""

    def test_dispatch_by_family(self) -> None:
        assert assemble_components(None) is None
        catalog = assemble_components(CatalogComponents(thumbnail_product_retailer_id="s"))
        assert catalog[-1]["sub_type"] == "CATALOG"

    def test_unsupported_family(self) -> None:
        with pytest.raises(TypeError):
            assemble_components(object())  # type: ignore[arg-type]

    def test_full_template_payload(self) -> None:
        message = TemplateMessage(
            to="15551234567",
            name="order_update",
            language="pt_BR",
            components=TemplateComponents(body=[TextParameter("123")]),
        )
        assert build_full_payload(message) == {
            "messaging_product": "whatsapp",
            "recipient_type": "individual",
            "to": "15551234567",
            "type": "template",
            "template": {
                "name": "order_update",
                "language": {"code": "pt_BR"},
                "components": [
                    {"type": "body", "parameters": [{"type": "text", "text": "123"}]}
                ],
            },
        }
