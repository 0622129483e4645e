"""
Brave Local Search v1.0

Web application Streamlit per la ricerca di attività locali
(ristoranti, negozi, servizi) tramite la Brave Search API.

Funzionalita':
- Ricerca locale con schede POI e descrizioni
- Fallback automatico sulla ricerca web se non ci sono location
- Tabella risultati e testo formattato del tool
"""
import streamlit as st
import pandas as pd
import requests
import logging
import sys
from pathlib import Path

# Aggiungi la directory corrente al path per gli import
sys.path.insert(0, str(Path(__file__).parent))

from config import config, DEFAULT_LOCAL_COUNT, MAX_COUNT
from core.exceptions import LocalSearchError, InvalidArgumentError
from core.models import SearchQuery, LocalSearchOutcome
from exporters.text_formatter import format_local_results
from orchestrator.local_search import LocalSearchOrchestrator
from utils.logger import setup_logging

# Setup logging
setup_logging(config)
logger = logging.getLogger(__name__)


# ============================================================================
# CONFIGURAZIONE PAGINA
# ============================================================================

st.set_page_config(
    page_title=f"{config.app_name} v{config.version}",
    page_icon="📍",
    layout="wide",
)


# ============================================================================
# INIZIALIZZAZIONE SESSION STATE
# ============================================================================

def init_session_state():
    """Inizializza le variabili di session state."""
    defaults = {
        'search_error': None,
        'outcome': None,
    }

    for key, default_value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default_value


init_session_state()


# ============================================================================
# FUNZIONI HELPER
# ============================================================================

@st.cache_resource
def get_orchestrator():
    """Restituisce istanza cached dell'orchestratore."""
    return LocalSearchOrchestrator()


def outcome_to_dataframe(outcome: LocalSearchOutcome) -> pd.DataFrame:
    """Converte i POI dell'esito in DataFrame per la tabella."""
    rows = [poi.to_dict(outcome.descriptions.get(poi.id)) for poi in outcome.pois]
    return pd.DataFrame(rows)


def execute_search(query_text: str, count: int):
    """Esegue la ricerca e aggiorna lo stato."""
    st.session_state.search_error = None
    st.session_state.outcome = None

    try:
        query = SearchQuery.from_args({"query": query_text, "count": count})
        st.session_state.outcome = get_orchestrator().search(query)
    except InvalidArgumentError as e:
        st.session_state.search_error = f"Query non valida: {e}"
    except LocalSearchError as e:
        logger.error(f"Search failed: {e}")
        st.session_state.search_error = str(e)
    except requests.RequestException as e:
        logger.error(f"Search failed, Brave API unreachable: {e}")
        st.session_state.search_error = f"Errore di connessione alla Brave Search API: {e}"


# ============================================================================
# INTERFACCIA
# ============================================================================

st.title("📍 Ricerca attività locali")

if not config.brave_api_key:
    st.error("BRAVE_API_KEY non configurata: impostarla nell'ambiente o nel file .env")
    st.stop()

with st.form("search_form"):
    query_text = st.text_input("Cosa cerchi?", placeholder="pizza near Central Park")
    count = st.slider("Numero di risultati", 1, MAX_COUNT, DEFAULT_LOCAL_COUNT)
    submitted = st.form_submit_button("🔍 CERCA", type="primary")

if submitted:
    with st.spinner("Ricerca in corso..."):
        execute_search(query_text, count)

if st.session_state.search_error:
    st.error(st.session_state.search_error)

outcome = st.session_state.outcome
if outcome is not None:
    if outcome.used_fallback:
        st.info("Nessuna attività locale trovata: risultati della ricerca web")
        for item in outcome.fallback["content"]:
            st.text(item["text"])
    elif not outcome.pois:
        st.warning("Nessun risultato locale")
    else:
        st.subheader(f"{len(outcome.pois)} risultati")
        df = outcome_to_dataframe(outcome)
        st.dataframe(df, hide_index=True, use_container_width=True)

        coords = df.dropna(subset=["Lat", "Lon"]).rename(columns={"Lat": "lat", "Lon": "lon"})
        if not coords.empty:
            st.map(coords[["lat", "lon"]])

        with st.expander("Testo del tool"):
            st.text(format_local_results(outcome.pois, outcome.descriptions))


# ============================================================================
# FOOTER
# ============================================================================

st.divider()
st.caption(f"📍 {config.app_name} v{config.version} | Powered by Brave Search API")
