# tests/test_ferias.py

from decimal import Decimal

import pytest
from pydantic import ValidationError

from brecho.folha.ferias import calcular_ferias, dias_vendaveis
from brecho.folha.schemas import FeriasInput


def test_ferias_integrais_sem_abono():
    # Act
    resultado = calcular_ferias(FeriasInput(salario_bruto=3000))
    # Assert: base INSS = 3000 + 1000
    assert resultado.valor_ferias == Decimal("3000.00")
    assert resultado.terco_constitucional == Decimal("1000.00")
    assert resultado.inss == Decimal("373.41")
    assert resultado.irrf == Decimal("162.55")
    assert resultado.total_bruto == Decimal("4000.00")
    assert resultado.valor_liquido == Decimal("3464.04")


def test_abono_pecuniario_e_isento():
    # Arrange
    sem_abono = calcular_ferias(FeriasInput(salario_bruto=3000))
    # Act
    com_abono = calcular_ferias(FeriasInput(salario_bruto=3000, abono_pecuniario=True))
    # Assert: 10 dias vendidos, mesmos descontos
    assert com_abono.dias_abono == 10
    assert com_abono.abono_pecuniario == Decimal("1000.00")
    assert com_abono.terco_abono == Decimal("333.33")
    assert com_abono.inss == sem_abono.inss
    assert com_abono.irrf == sem_abono.irrf
    assert com_abono.total_bruto == Decimal("5333.33")
    assert com_abono.valor_liquido == Decimal("4797.37")


def test_limite_de_dias_vendaveis():
    assert dias_vendaveis(30) == 10
    assert dias_vendaveis(20) == 6
    assert dias_vendaveis(10) == 3


def test_ferias_parciais():
    resultado = calcular_ferias(FeriasInput(salario_bruto=3000, dias_ferias=20))
    assert resultado.valor_ferias == Decimal("2000.00")
    assert resultado.terco_constitucional == Decimal("666.67")


@pytest.mark.parametrize("dias", [9, 31])
def test_dias_fora_do_intervalo(dias):
    with pytest.raises(ValidationError):
        FeriasInput(salario_bruto=3000, dias_ferias=dias)
