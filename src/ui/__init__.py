# Streamlit rendering for the Group Design app
