from cupviz.core.config import PORT

bind = f"0.0.0.0:{PORT}"
workers = 2
