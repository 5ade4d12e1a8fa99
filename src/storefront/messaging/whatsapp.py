"""WhatsApp order handoff: message text and wa.me deep link."""

from __future__ import annotations

from typing import Final, Optional
from urllib.parse import quote

from ..domain.entities import Order
from ..domain.money import format_brl

WHATSAPP_BASE_URL: Final[str] = "https://wa.me"

# Characters encodeURIComponent leaves untouched besides alphanumerics.
_URI_COMPONENT_SAFE: Final[str] = "-_.!~*'()"

PAYMENT_METHOD_LABELS: Final[dict[str, str]] = {
    "pix": "PIX",
    "card": "Cartão",
    "cash_exact": "Dinheiro (valor exato)",
    "cash_change": "Dinheiro",
}


def _payment_line(order: Order) -> Optional[str]:
    if order.payment_method is None:
        return None
    label = PAYMENT_METHOD_LABELS[order.payment_method]
    if order.payment_method == "cash_change" and order.change_for is not None:
        label = f"{label} (troco para {format_brl(order.change_for)})"
    return f"*Forma de pagamento:* {label}"


def build_order_message(order: Order) -> str:
    """Render the order as the text sent to the store's WhatsApp."""
    customer = order.customer
    lines = [
        "Olá, segue pedido de reabastecimento:",
        "",
        f"*Pedido:* #{order.order_number}",
        f"*Responsável:* {customer.responsible_name}",
    ]
    if customer.business_name:
        lines.append(f"*Empresa:* {customer.business_name}")
    lines.append(f"*Endereço:* {customer.address}")
    if customer.complement:
        lines.append(f"*Complemento:* {customer.complement}")
    lines.append(f"*Telefone:* {customer.phone}")
    lines.append(f"*E-mail:* {customer.email}")
    if customer.order_notes:
        lines.append(f"*Observações:* {customer.order_notes}")

    lines += ["", "*Itens do pedido:*"]
    for item in order.items:
        lines.append(
            f"- {item.product_name} (Qtd: {item.quantity}) - {format_brl(item.subtotal)}"
        )
    lines.append("")

    if order.total_discount > 0:
        lines.append(f"*Desconto:* {format_brl(order.total_discount)}")
    if order.shipping_city:
        lines.append(
            f"*Frete ({order.shipping_city} - {order.shipping_neighborhood or ''}):* "
            f"{format_brl(order.shipping_cost)}"
        )
    else:
        lines.append("*Entrega:* Retirada na loja")

    payment_line = _payment_line(order)
    if payment_line:
        lines.append(payment_line)

    lines.append(f"*Valor total do pedido:* {format_brl(order.total_amount)}")
    return "\n".join(lines)


def build_whatsapp_url(number: str, message: str) -> str:
    """Return a wa.me link that opens a chat with `message` pre-filled."""
    digits = "".join(ch for ch in number if ch.isdigit())
    if not digits:
        raise ValueError("WhatsApp number must contain at least one digit")
    return f"{WHATSAPP_BASE_URL}/{digits}?text={quote(message, safe=_URI_COMPONENT_SAFE)}"
