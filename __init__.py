"""Personal Expense Tracker.

A single Streamlit page over the expense backend: upload a PDF statement,
add transactions by hand and browse them month by month.  Run it with
``streamlit run app.py``; see ``config.py`` for the backend settings.
"""
