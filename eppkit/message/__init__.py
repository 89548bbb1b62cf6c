"""EPP message queue commands: poll and ack."""