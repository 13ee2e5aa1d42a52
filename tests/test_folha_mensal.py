# tests/test_folha_mensal.py

from decimal import Decimal

import pytest
from pydantic import ValidationError

from brecho.folha.folha_mensal import calcular_folha
from brecho.folha.schemas import FolhaInput


def criar_folha(**dados) -> FolhaInput:
    padrao = {"salario_bruto": 3000.00}
    padrao.update(dados)
    return FolhaInput(**padrao)


def test_folha_exemplo_completo_com_vale_transporte():
    # Arrange
    dados = criar_folha(vale_transporte_perc=6)
    # Act
    resultado = calcular_folha(dados)
    # Assert
    assert resultado.total_proventos == Decimal("3000.00")
    assert resultado.inss.valor == Decimal("253.41")
    assert resultado.base_irrf == Decimal("2746.59")
    assert resultado.irrf.valor == Decimal("36.55")
    assert resultado.irrf.faixa == "7,5%"
    assert resultado.vale_transporte == Decimal("180.00")
    assert resultado.total_descontos == Decimal("469.96")
    assert resultado.salario_liquido == Decimal("2530.04")


def test_encargos_nao_reduzem_o_liquido():
    resultado = calcular_folha(criar_folha())
    assert resultado.fgts == Decimal("240.00")
    assert resultado.inss_patronal == Decimal("840.00")
    assert resultado.total_encargos == Decimal("1080.00")
    assert resultado.salario_liquido == resultado.total_proventos - resultado.total_descontos


def test_horas_extras_e_adicional_noturno():
    # Arrange: valor da hora = 2200 / 220 = 10,00
    dados = criar_folha(salario_bruto=2200, horas_extras=10, adicional_noturno=5)
    # Act
    resultado = calcular_folha(dados)
    # Assert: 10h x 10 x 1,5 = 150 ; 5h x 10 x 0,2 = 10
    assert resultado.valor_horas_extras == Decimal("150.00")
    assert resultado.valor_adicional_noturno == Decimal("10.00")
    assert resultado.total_proventos == Decimal("2360.00")
    assert resultado.inss.valor == Decimal("189.63")
    assert resultado.irrf.valor == Decimal("0.00")
    assert resultado.salario_liquido == Decimal("2170.37")


def test_hora_extra_100_por_cento():
    resultado = calcular_folha(
        criar_folha(salario_bruto=2200, horas_extras=10, percentual_hora_extra=100)
    )
    assert resultado.valor_horas_extras == Decimal("200.00")


def test_dependentes_reduzem_irrf():
    sem = calcular_folha(criar_folha(dependentes=0))
    com = calcular_folha(criar_folha(dependentes=2))
    assert sem.base_irrf - com.base_irrf == Decimal("379.18")
    assert com.irrf.valor < sem.irrf.valor


def test_liquido_negativo_nao_e_limitado_a_zero():
    # Descontos acima dos proventos ficam negativos, sem piso
    resultado = calcular_folha(criar_folha(salario_bruto=1000, outros_descontos=2000))
    assert resultado.inss.valor == Decimal("75.00")
    assert resultado.salario_liquido == Decimal("-1075.00")


def test_validacao_lista_todos_os_campos_invalidos():
    with pytest.raises(ValidationError) as exc:
        FolhaInput(salario_bruto=0, percentual_hora_extra=40, vale_transporte_perc=7)

    campos = {erro["loc"][0] for erro in exc.value.errors()}
    assert campos == {"salario_bruto", "percentual_hora_extra", "vale_transporte_perc"}


def test_dependentes_precisa_ser_inteiro():
    with pytest.raises(ValidationError):
        criar_folha(dependentes=1.5)


def test_resposta_mantem_formato_da_api():
    resposta = calcular_folha(criar_folha(vale_transporte_perc=6)).as_dict()
    assert resposta["salario_liquido"] == 2530.04
    assert resposta["irrf"] == {
        "valor": 36.55,
        "aliquota": 7.5,
        "faixa": "7,5%",
        "base_calculo": 2746.59,
    }
    assert resposta["encargos"]["total"] == 1080.00
