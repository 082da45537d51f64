"""Services: the Table component and SUMMARY rendering."""
