"""okr-sheets: read OKR folders and spreadsheets from Google Drive."""
