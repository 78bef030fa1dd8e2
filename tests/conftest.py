from __future__ import annotations
import random
import types
import pytest
import pandas as pd

from pdv.utils.config import set_settings

# ---------- GERADORES DE DOCUMENTOS (cálculo independente do módulo) ----------

def make_cpf(base: str) -> str:
    d = [int(c) for c in base]
    d1 = sum(v * (10 - i) for i, v in enumerate(d)) * 10 % 11 % 10
    d.append(d1)
    d2 = sum(v * (11 - i) for i, v in enumerate(d)) * 10 % 11 % 10
    return base + f"{d1}{d2}"

def make_cnpj(base: str) -> str:
    def dv(digits, weights):
        r = sum(int(c) * w for c, w in zip(digits, weights)) % 11
        return 0 if r < 2 else 11 - r
    d1 = dv(base, [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2])
    d2 = dv(base + str(d1), [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2])
    return base + f"{d1}{d2}"

def _random_bases(size: int, count: int, seed: int) -> list[str]:
    rng = random.Random(seed)
    out = []
    while len(out) < count:
        b = "".join(str(rng.randint(0, 9)) for _ in range(size))
        if len(set(b)) > 1:
            out.append(b)
    return out

# ---------- FIXTURES DE DADOS BÁSICOS ----------

@pytest.fixture
def valid_cpfs() -> list[str]:
    return [make_cpf(b) for b in _random_bases(9, 50, seed=11)]

@pytest.fixture
def valid_cnpjs() -> list[str]:
    return [make_cnpj(b) for b in _random_bases(12, 50, seed=14)]

@pytest.fixture
def clientes_df() -> pd.DataFrame:
    return pd.DataFrame([
        {"nome": "Ana", "documento": "529.982.247-25", "telefone": "11987654321", "email": "ana@loja.com.br"},
        {"nome": "Mercado Bom", "documento": "11.222.333/0001-81", "telefone": "1133224455", "email": "contato@bom"},
        {"nome": "Zé", "documento": "111.111.111-11", "telefone": "123", "email": ""},
        {"nome": "", "documento": None, "telefone": None, "email": "x@y.z"},
    ])

# ---------- CONFIGURAÇÃO LIMPA POR TESTE ----------

@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    for k in ("PDV_LOCALE", "PDV_CURRENCY", "PDV_SEQUENCE_PREFIX", "PDV_SEQUENCE_PAD", "PDV_LOG_LEVEL"):
        monkeypatch.delenv(k, raising=False)
    set_settings(None)
    yield
    set_settings(None)

# ---------- UTIL: STREAMLIT FALSO PARA TESTES DE COMPONENTES ----------

@pytest.fixture
def mock_streamlit():
    """
    Namespace mínimo com as funções do streamlit usadas nos componentes.
    `inputs` define o que cada text_input devolve (por label); `calls` registra o que foi renderizado.
    """
    calls = []
    st = types.SimpleNamespace(inputs={}, calls=calls)
    def _text_input(label, value="", key=None, **k):
        calls.append(("text_input", label))
        return st.inputs.get(label, value)
    st.text_input = _text_input
    st.error = lambda msg, **k: calls.append(("error", msg))
    st.caption = lambda msg, **k: calls.append(("caption", msg))
    st.markdown = lambda *a, **k: calls.append(("markdown",))
    st.title = lambda t, **k: calls.append(("title", t))
    st.subheader = lambda t, **k: calls.append(("subheader", t))
    st.divider = lambda **k: calls.append(("divider",))
    return st
