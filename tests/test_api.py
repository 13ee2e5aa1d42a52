# tests/test_api.py

import pytest
from fastapi.testclient import TestClient

from brecho.api import create_app
from brecho.config.settings import settings


@pytest.fixture
def client():
    return TestClient(create_app())


def url(rota: str) -> str:
    return f"{settings.API_PREFIX}{rota}"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_calcular_folha(client):
    response = client.post(
        url("/folha/calcular"), json={"salario_bruto": 3000, "vale_transporte_perc": 6}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["inss"]["valor"] == 253.41
    assert body["irrf"]["valor"] == 36.55
    assert body["salario_liquido"] == 2530.04


def test_validacao_responde_400_com_todos_os_campos(client):
    response = client.post(
        url("/folha/calcular"),
        json={"salario_bruto": -1, "vale_transporte_perc": 10, "dependentes": -2},
    )
    assert response.status_code == 400
    campos = {erro["campo"] for erro in response.json()["error"]}
    assert campos == {"salario_bruto", "vale_transporte_perc", "dependentes"}


def test_campo_obrigatorio_ausente(client):
    response = client.post(url("/folha/13-salario"), json={"salario_bruto": 3000})
    assert response.status_code == 400
    campos = {erro["campo"] for erro in response.json()["error"]}
    assert campos == {"meses_trabalhados", "parcela"}


def test_decimo_terceiro_e_ferias(client):
    decimo = client.post(
        url("/folha/13-salario"),
        json={"salario_bruto": 3000, "meses_trabalhados": 12, "parcela": "primeira"},
    )
    ferias = client.post(
        url("/folha/ferias"), json={"salario_bruto": 3000, "abono_pecuniario": True}
    )
    assert decimo.json()["valor_liquido"] == 1500.00
    assert ferias.json()["abono_pecuniario"] == {
        "vendido": True,
        "dias": 10,
        "valor": 1000.00,
        "terco": 333.33,
    }


def test_folha_em_lote(client):
    response = client.post(
        url("/folha/lote"),
        json={"funcionarios": [{"nome": "Ana", "salario_bruto": 3000, "vale_transporte_perc": 6}]},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["resumo"]["calculados"] == 1
    assert body["funcionarios"][0]["SalarioLiquido"] == 2530.04


def test_simulador_de_impostos(client):
    response = client.post(
        url("/simulador/impostos"), json={"faturamento_mensal": 20000}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["tipo_atividade"] == "comercio"
    assert body["mei"]["elegivel"] is False
    assert body["recomendacao"] == "Simples Nacional"


def test_simulador_de_impostos_com_faturamento_de_fracao_de_centavo(client):
    response = client.post(
        url("/simulador/impostos"), json={"faturamento_mensal": 0.004}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["faturamento_mensal"] == 0.0
    assert body["simples"]["aliquota_efetiva"] == 4.0
    assert body["recomendacao"] == "Simples Nacional"


def test_simulador_de_impostos_atividade_invalida(client):
    response = client.post(
        url("/simulador/impostos"),
        json={"faturamento_mensal": 20000, "tipo_atividade": "agro"},
    )
    assert response.status_code == 400
    assert response.json()["error"][0]["campo"] == "tipo_atividade"


def test_simulador_de_rescisao(client):
    response = client.post(
        url("/simulador/rescisao"),
        json={
            "salario_bruto": 3000,
            "data_admissao": "2020-01-10",
            "data_demissao": "2025-03-15",
            "tipo_rescisao": "acordo",
            "saldo_fgts": 5000,
        },
    )
    assert response.status_code == 200
    resumo = response.json()["resumo"]
    assert resumo["fgts"]["multa"] == 1000.00
    assert resumo["fgts"]["saque_total"] == 5000.00
    assert resumo["direito_seguro_desemprego"] is False


def test_resumo_do_ponto(client):
    response = client.post(
        url("/ponto/resumo"),
        json={
            "registros": [
                {"data": "2025-03-03", "hora": "08:00", "tipo": "entrada"},
                {"data": "2025-03-03", "hora": "18:00", "tipo": "saida"},
            ]
        },
    )
    assert response.status_code == 200
    assert response.json()["horas_extras_decimal"] == 2.0


def test_run_sobe_o_uvicorn_com_host_e_porta_das_settings(monkeypatch):
    # Arrange
    import brecho.api as api

    chamadas = []
    monkeypatch.setattr(
        api.uvicorn, "run", lambda alvo, **kwargs: chamadas.append((alvo, kwargs))
    )
    # Act
    api.run()
    # Assert
    assert chamadas == [
        ("brecho.api:app", {"host": settings.HOST, "port": settings.PORT})
    ]
