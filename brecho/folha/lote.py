# brecho/folha/lote.py

"""
Folha em lote: roda a folha mensal para todo o cadastro de funcionários
(o mesmo cadastro que preenche a calculadora individual) e resume o custo.
Linhas com dados inválidos são marcadas, sem derrubar o lote.
"""

from typing import List

import pandas as pd
from pydantic import ValidationError

from brecho.config.logging_config import log

from .folha_mensal import calcular_folha
from .schemas import FuncionarioFolha

COLUNAS_FINAIS = [
    "Matricula",
    "Nome",
    "Cargo",
    "Status",
    "Observacoes",
    "SalarioBruto",
    "TotalProventos",
    "INSS",
    "IRRF",
    "TotalDescontos",
    "SalarioLiquido",
    "FGTS",
    "INSSPatronal",
]


def processar_folha_lote(funcionarios: List[dict]) -> pd.DataFrame:
    log.info(f"Iniciando folha em lote para {len(funcionarios)} funcionário(s)...")

    if not funcionarios:
        log.warning("Nenhum funcionário informado para a folha em lote.")
        return pd.DataFrame(columns=COLUNAS_FINAIS)

    # Objetos Python puros (sem np.int64) para o pydantic validar cada linha
    df = pd.DataFrame(funcionarios).astype(object)
    # Campos ausentes no cadastro viram None e assumem o default do molde
    df = df.where(pd.notna(df), None)

    def calcular_funcionario(row):
        dados = {k: v for k, v in row.to_dict().items() if v is not None}
        linha = {
            "Matricula": dados.get("matricula") or "",
            "Nome": dados.get("nome") or "",
            "Cargo": dados.get("cargo") or "",
            "Status": "Calculado",
            "Observacoes": "",
        }

        try:
            funcionario = FuncionarioFolha(**dados)
        except ValidationError as e:
            log.error(f"Erro de validação no funcionário {linha['Nome'] or 'N/A'}: {e}")
            campos = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            linha["Status"] = "Inválido"
            linha["Observacoes"] = f"Dados inválidos: {campos}"
            return pd.Series(linha)

        if funcionario.status.strip().lower() != "ativo":
            linha["Status"] = "Ignorado"
            linha["Observacoes"] = f"Funcionário com status '{funcionario.status}'."
            return pd.Series(linha)

        resultado = calcular_folha(funcionario)
        linha.update(
            {
                "SalarioBruto": float(resultado.salario_bruto),
                "TotalProventos": float(resultado.total_proventos),
                "INSS": float(resultado.inss.valor),
                "IRRF": float(resultado.irrf.valor),
                "TotalDescontos": float(resultado.total_descontos),
                "SalarioLiquido": float(resultado.salario_liquido),
                "FGTS": float(resultado.fgts),
                "INSSPatronal": float(resultado.inss_patronal),
            }
        )
        if resultado.salario_liquido < 0:
            linha["Observacoes"] = "Líquido negativo: descontos superam proventos."
        return pd.Series(linha)

    df_resultado = df.apply(calcular_funcionario, axis=1)

    for col in COLUNAS_FINAIS:
        if col not in df_resultado.columns:
            df_resultado[col] = 0.0

    numeric_cols = COLUNAS_FINAIS[5:]
    df_resultado[numeric_cols] = df_resultado[numeric_cols].fillna(0.0)

    df_resultado = df_resultado[COLUNAS_FINAIS].sort_values(by="Nome", ignore_index=True)
    log.success("Folha em lote concluída.")
    return df_resultado


def build_summary(df_resultado: pd.DataFrame) -> dict:
    if df_resultado is None or df_resultado.empty:
        return {
            "calculados": 0,
            "ignorados": 0,
            "invalidos": 0,
            "total": 0,
            "total_proventos": 0.0,
            "total_descontos": 0.0,
            "total_liquido": 0.0,
            "total_encargos": 0.0,
        }

    calculados = df_resultado[df_resultado["Status"] == "Calculado"]

    return {
        "calculados": len(calculados),
        "ignorados": int((df_resultado["Status"] == "Ignorado").sum()),
        "invalidos": int((df_resultado["Status"] == "Inválido").sum()),
        "total": len(df_resultado),
        "total_proventos": round(float(calculados["TotalProventos"].sum()), 2),
        "total_descontos": round(float(calculados["TotalDescontos"].sum()), 2),
        "total_liquido": round(float(calculados["SalarioLiquido"].sum()), 2),
        "total_encargos": round(
            float(calculados["FGTS"].sum() + calculados["INSSPatronal"].sum()), 2
        ),
    }
