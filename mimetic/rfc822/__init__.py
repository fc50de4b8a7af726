"""RFC 822 mailboxes, addresses, groups, dates, message ids, fields, headers and messages."""