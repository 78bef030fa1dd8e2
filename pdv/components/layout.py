from typing import Mapping

import streamlit as st

from pdv.models.validation import FieldResult

_PDV_CSS = """
<style>
.block-container { max-width: 960px; }
.pdv-pending { color: #b42318; font-size: 0.9rem; }
</style>
"""

def pdv_header(title: str, subtitle: str = ""):
    """Cabeçalho das telas de cadastro do PDV."""
    st.markdown(_PDV_CSS, unsafe_allow_html=True)
    st.title(title)
    if subtitle:
        st.caption(subtitle)
    st.divider()

def validation_summary(results: Mapping[str, FieldResult]) -> list[str]:
    """
    Lista os campos pendentes antes de salvar. Retorna os rótulos inválidos
    (vazio quando o formulário pode ser salvo).
    """
    pending = [label for label, r in results.items() if not r.is_valid]
    if pending:
        items = "".join(f"<li>{label}</li>" for label in pending)
        st.markdown(f'<ul class="pdv-pending">{items}</ul>', unsafe_allow_html=True)
    else:
        st.caption("Todos os campos conferidos.")
    return pending
