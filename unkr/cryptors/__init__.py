"""Individual cryptors, the Enigma rotor tables and the character helpers they share."""