"""UI labels shown on the dashboard cards."""

# Company card
LABEL_MARKET_CAP = "Market Cap"
LABEL_PE_RATIO = "P/E Ratio"
LABEL_VOLUME = "Volume"
LABEL_DAILY_CHANGE = "Variazione Giornaliera"

# Recommendation card
LABEL_RECOMMENDATION_TITLE = "Raccomandazione AI"
LABEL_CONFIDENCE = "Confidenza"
LABEL_STOP_LOSS = "Stop Loss"
LABEL_TARGET_PRICE = "Target Price"
LABEL_TIMEFRAME = "Timeframe"
LABEL_ANALYSIS = "Analisi Dettagliata"
LABEL_RISK_MANAGEMENT = "Gestione del Rischio"

DISCLAIMER_TEXT = (
    "<strong>Disclaimer:</strong> Questa analisi è generata da intelligenza artificiale "
    "e non costituisce consulenza finanziaria professionale. "
    "Gli investimenti comportano sempre dei rischi. Consulta sempre un consulente "
    "finanziario qualificato prima di prendere decisioni di investimento."
)

# Price chart
LABEL_PRICE = "Prezzo"
LABEL_DATE = "Data"
LABEL_MIN_PRICE = "Prezzo Min"
LABEL_MAX_PRICE = "Prezzo Max"
LABEL_AVERAGE_VOLUME = "Volume Medio"
LABEL_VOLATILITY = "Volatilità"
NO_CHART_DATA_MESSAGE = "Nessun dato disponibile per il grafico"
