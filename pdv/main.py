# pdv/main.py — streamlit run pdv/main.py
from __future__ import annotations
import streamlit as st

from pdv.components.forms import numeric_input, validated_input
from pdv.components.layout import pdv_header, validation_summary
from pdv.models.validation import FieldKind
from pdv.utils.currency import format_currency
from pdv.utils.text import parse_float

st.set_page_config(page_title="PDV • Cadastro", layout="centered")
pdv_header("🧾 Cadastro de cliente", "Documentos, contato e limite de crédito")

st.subheader("Identificação")
nome, r_nome = validated_input("Nome", FieldKind.REQUIRED, required=True, key="nome")
doc, r_doc = validated_input("CPF/CNPJ", FieldKind.DOCUMENT, required=True, key="documento")

st.subheader("Contato")
fone, r_fone = validated_input("Telefone", FieldKind.PHONE, key="telefone")
email, r_email = validated_input("E-mail", FieldKind.EMAIL, key="email")

st.subheader("Crédito")
limite, r_limite = numeric_input("Limite de crédito", min_value=0, max_value=50000, key="limite")
if limite and r_limite.is_valid:
    st.caption(f"Limite: {format_currency(parse_float(limite))}")

pending = validation_summary({
    "Nome": r_nome,
    "CPF/CNPJ": r_doc,
    "Telefone": r_fone,
    "E-mail": r_email,
    "Limite de crédito": r_limite,
})
if st.button("Salvar", type="primary", disabled=bool(pending)):
    st.session_state["cliente"] = {
        "nome": nome.strip(),
        "documento": doc,
        "telefone": fone,
        "email": email.strip(),
        "limite": parse_float(limite) or 0.0,
    }
    st.success("Cliente validado.")
