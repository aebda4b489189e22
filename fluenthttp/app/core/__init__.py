SERVICE_NAME = "fluenthttp"
