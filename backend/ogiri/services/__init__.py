"""Services — handler objects that apply validation and parent checks around store calls."""
