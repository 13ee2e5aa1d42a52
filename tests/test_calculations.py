# tests/test_calculations.py

from decimal import Decimal

from brecho.folha.calculations import base_irrf, calc_fgts, calc_inss, calc_inss_patronal, calc_irrf
from brecho.folha.tabelas import DEDUCAO_DEPENDENTE, TETO_INSS


def test_inss_primeira_faixa_no_limite():
    # Act
    resultado = calc_inss(1518.00)
    # Assert: 1518,00 x 7,5%
    assert resultado.valor == Decimal("113.85")
    assert resultado.aliquota_efetiva == Decimal("7.50")


def test_inss_progressivo_por_fatias():
    # 113,85 + 114,8292 + 24,7344 = 253,4136
    resultado = calc_inss(3000)
    assert resultado.valor == Decimal("253.41")
    assert resultado.aliquota_efetiva == Decimal("8.45")


def test_inss_respeita_teto():
    assert calc_inss(8157.41).valor == TETO_INSS
    assert calc_inss(10000).valor == Decimal("951.63")
    assert calc_inss(50000).valor == Decimal("951.63")


def test_inss_base_zero_nao_divide_por_zero():
    resultado = calc_inss(0)
    assert resultado.valor == Decimal("0.00")
    assert resultado.aliquota_efetiva == Decimal("0.00")


def test_inss_monotonico_e_limitado():
    bases = [0, 500, 1517.99, 1518, 1518.01, 2000, 2793.88, 3500, 4190.83, 6000, 8157.41, 9000, 20000]
    valores = [calc_inss(b).valor for b in bases]
    assert valores == sorted(valores)
    assert all(v <= TETO_INSS for v in valores)


def test_irrf_limite_de_isencao():
    resultado = calc_irrf(2259.20)
    assert resultado.valor == Decimal("0.00")
    assert resultado.faixa == "Isento"


def test_irrf_logo_acima_da_isencao_usa_faixa_de_7_5():
    # Arrange / Act
    no_limite = calc_irrf(2259.21)
    acima = calc_irrf(2300)
    # Assert: 2300 x 7,5% - 169,44
    assert no_limite.faixa == "7,5%"
    assert no_limite.aliquota == Decimal("7.5")
    assert acima.valor == Decimal("3.06")


def test_irrf_ultima_faixa_sem_teto():
    # 5000 x 27,5% - 896,00
    resultado = calc_irrf(5000)
    assert resultado.valor == Decimal("479.00")
    assert resultado.faixa == "27,5%"


def test_irrf_base_negativa_e_isenta():
    resultado = calc_irrf(-150)
    assert resultado.valor == Decimal("0.00")
    assert resultado.faixa == "Isento"


def test_dependente_reduz_base_em_valor_fixo_e_nunca_aumenta_irrf():
    # Arrange
    bases = [base_irrf(3000, Decimal("253.41"), dep) for dep in range(4)]
    # Assert
    for menor, maior in zip(bases[1:], bases[:-1]):
        assert maior - menor == DEDUCAO_DEPENDENTE
    irrfs = [calc_irrf(b).valor for b in bases]
    assert irrfs == sorted(irrfs, reverse=True)
    assert irrfs[0] == Decimal("36.55")
    assert irrfs[1] == Decimal("22.33")


def test_encargos_do_empregador():
    assert calc_fgts(3000) == Decimal("240.00")
    assert calc_inss_patronal(3000) == Decimal("840.00")
