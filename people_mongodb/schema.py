# schema.py

PERSON_COLLECTION = "people"

person_schema = {
    "bsonType": "object",
    "required": ["name"],
    "properties": {
        "name": {"bsonType": "string"},
        "age": {"bsonType": ["int", "long", "double", "decimal", "null"]},
        "favoriteFoods": {
            "bsonType": "array",
            "items": {"bsonType": "string"}
        }
    }
}
