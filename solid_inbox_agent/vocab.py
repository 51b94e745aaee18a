"""Vocabulary identifiers used when reading inboxes and notifications."""

AS = "https://www.w3.org/ns/activitystreams#"
LDP = "http://www.w3.org/ns/ldp#"
DCTERMS = "http://purl.org/dc/terms/"
XSD = "http://www.w3.org/2001/XMLSchema#"
RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
FOAF = "http://xmlns.com/foaf/0.1/"
SCHEMA = "http://schema.org/"

# Containers
LDP_CONTAINS = LDP + "contains"
DCTERMS_MODIFIED = DCTERMS + "modified"

# Profile -> inbox, either vocabulary is accepted
INBOX_PREDICATES = (LDP + "inbox", AS + "inbox")

# Activities
AS_GENERATOR = AS + "generator"
AS_SUBJECT = AS + "subject"
AS_OBJECT = AS + "object"
AS_TARGET = AS + "target"
AS_ACTOR = AS + "actor"
AS_IMAGE = AS + "image"
AS_ICON = AS + "icon"
AS_NAME = AS + "name"
AS_PUBLISHED = AS + "published"
AS_CONTENT = AS + "content"
AS_SUMMARY = AS + "summary"
RDF_TYPE = RDF + "type"

# Predicates that make an activity a part of another activity
EMBEDDING_PREDICATES = (AS_SUBJECT, AS_OBJECT, AS_TARGET, AS_ACTOR)

# Generator profile images, used when the icon has no url
IMAGE_FALLBACK_PREDICATES = (SCHEMA + "image", FOAF + "img")

# Literal datatypes
XSD_INTEGER = XSD + "integer"
XSD_NON_NEGATIVE_INTEGER = XSD + "nonNegativeInteger"
XSD_DECIMAL = XSD + "decimal"
XSD_BOOLEAN = XSD + "boolean"
XSD_DATE = XSD + "date"
XSD_TIME = XSD + "time"
XSD_DATETIME = XSD + "dateTime"
XSD_STRING = XSD + "string"
RDF_LANG_STRING = RDF + "langString"

TURTLE = "text/turtle"
