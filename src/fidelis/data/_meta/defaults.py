# Indentation of serialize_json output. 0 writes compact JSON.
JSON_INDENT = 0
