from ticket_booking.main import main

main()
